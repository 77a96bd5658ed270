"""
Form input validation.

Turns raw form values (strings from an HTML form or JSON numbers) into a
HealthInput, or raises InvalidInputError naming the offending field.
Biometrics are required and range-checked; lifestyle fields fall back to
their defaults when left blank.
"""
import html
import math
from typing import Any, Mapping, Optional

from heartcheck.core.errors import InvalidInputError
from heartcheck.models.health_data import HealthInput

# field -> (label, min, max)
REQUIRED_RANGES = {
    "age": ("Age", 1, 120),
    "weight": ("Weight", 1, 500),
    "height": ("Height", 100, 250),
    "waist": ("Waist", 1, 200),
}

TRUE_VALUES = {"1", "true", "on", "yes"}

# Accept both the form's camelCase ids and snake_case JSON keys
ALIASES = {
    "height": ("height", "heightCm", "height_cm"),
    "junkFood": ("junkFood", "junk_food"),
    "familyHistory": ("familyHistory", "family_history"),
    "highBp": ("highBp", "high_bp"),
}


def _get(raw: Mapping[str, Any], key: str) -> Any:
    for name in ALIASES.get(key, (key,)):
        if name in raw:
            return raw[name]
    return None


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def _to_number(value: Any) -> Optional[float]:
    """Best-effort conversion to float; None when not a finite number."""
    if isinstance(value, bool):
        return float(value)
    try:
        num = float(str(value).strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(num) or math.isinf(num):
        return None
    return num


def validate_numeric_input(value: Any, minimum: float, maximum: float, field: str, label: str) -> float:
    num = _to_number(value)
    if num is None:
        raise InvalidInputError(field, f"{label} must be a valid number")
    if num < minimum or num > maximum:
        raise InvalidInputError(field, f"{label} must be between {minimum} and {maximum}")
    return num


def _lenient_int(raw: Mapping[str, Any], key: str, label: str, default: int = 0) -> int:
    value = _get(raw, key)
    num = _to_number(value) if not _is_blank(value) else None
    # Blank, non-numeric and zero all take the default
    if not num:
        return default
    if num < 0:
        raise InvalidInputError(key, f"{label} cannot be negative")
    return int(num)


def _lenient_float(raw: Mapping[str, Any], key: str, label: str) -> float:
    value = _get(raw, key)
    num = _to_number(value) if not _is_blank(value) else None
    if not num:
        return 0.0
    if num < 0:
        raise InvalidInputError(key, f"{label} cannot be negative")
    return num


def _flag(raw: Mapping[str, Any], key: str, label: str) -> int:
    value = _lenient_int(raw, key, label)
    if value not in (0, 1):
        raise InvalidInputError(key, f"{label} must be 0 or 1")
    return value


def _checkbox(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if _is_blank(value):
        return False
    return str(value).strip().lower() in TRUE_VALUES


def _optional_lab(raw: Mapping[str, Any], key: str, label: str, as_int: bool = False):
    value = _get(raw, key)
    if _is_blank(value):
        return None
    num = _to_number(value)
    if num is None:
        raise InvalidInputError(key, f"{label} must be a valid number")
    if num < 0:
        raise InvalidInputError(key, f"{label} cannot be negative")
    return int(num) if as_int else num


def sanitize_text(value: Any) -> Optional[str]:
    if _is_blank(value):
        return None
    return html.escape(str(value).strip())


def normalize_gender(value: Any) -> str:
    text = str(value or "").strip().lower()
    if text == "male":
        return "Male"
    if text == "female":
        return "Female"
    return "Other"


def parse_health_form(raw: Mapping[str, Any]) -> HealthInput:
    """Validate and coerce one form submission."""
    biometrics = {}
    for key, (label, minimum, maximum) in REQUIRED_RANGES.items():
        biometrics[key] = validate_numeric_input(_get(raw, key), minimum, maximum, key, label)

    if not float(biometrics["age"]).is_integer():
        raise InvalidInputError("age", "Age must be a whole number of years")

    stress = _lenient_int(raw, "stress", "Stress level", default=1)
    if stress not in (1, 2, 3):
        raise InvalidInputError("stress", "Stress level must be between 1 and 3")

    return HealthInput(
        name=sanitize_text(_get(raw, "name")),
        gender=normalize_gender(_get(raw, "gender")),
        age=int(biometrics["age"]),
        weight=biometrics["weight"],
        height_cm=biometrics["height"],
        waist=biometrics["waist"],
        steps=_lenient_int(raw, "steps", "Daily steps"),
        junk_food=_lenient_int(raw, "junkFood", "Junk food frequency"),
        exercise=_lenient_float(raw, "exercise", "Exercise hours"),
        alcohol=_lenient_int(raw, "alcohol", "Alcohol units"),
        smoking=_flag(raw, "smoking", "Smoking"),
        sleep=_lenient_float(raw, "sleep", "Sleep hours"),
        stress=stress,
        family_history=_flag(raw, "familyHistory", "Family history"),
        high_bp=_checkbox(_get(raw, "highBp")),
        diabetes=_checkbox(_get(raw, "diabetes")),
        cholesterol=_optional_lab(raw, "cholesterol", "Cholesterol", as_int=True),
        rbc=_optional_lab(raw, "rbc", "RBC count"),
        wbc=_optional_lab(raw, "wbc", "WBC count"),
    )
