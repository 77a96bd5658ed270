"""
Heuristic risk-factor evaluators.

One pure function per scored dimension. Each returns a RiskFactorResult
whose message is None when the input sits in the factor's safe band.

The weights are demonstration constants, not validated clinical
coefficients. This is not a medical device.
"""
from typing import Callable, List, Optional, Tuple

from heartcheck.models.assessment import RiskFactorResult
from heartcheck.models.health_data import HealthInput

# Factor keys, in declaration order. Precautions are listed in this order.
AGE = "age"
BMI = "bmi"
WAIST = "waist"
SMOKING = "smoking"
EXERCISE = "exercise"
STEPS = "steps"
DIET = "diet"
ALCOHOL = "alcohol"
SLEEP = "sleep"
STRESS = "stress"
FAMILY_HISTORY = "family_history"
BLOOD_PRESSURE = "blood_pressure"
DIABETES = "diabetes"
CHOLESTEROL = "cholesterol"

MEDICAL_CONDITIONS = (BLOOD_PRESSURE, DIABETES)


def _safe(factor: str) -> RiskFactorResult:
    return RiskFactorResult(factor=factor, score=0, message=None)


def evaluate_age(age: int) -> RiskFactorResult:
    """One point per full five years past 30; advice only past 45."""
    if age <= 30:
        return _safe(AGE)
    score = (age - 30) // 5
    message = "Regular check-ups are crucial given your age." if age > 45 else None
    return RiskFactorResult(AGE, score, message)


def evaluate_bmi(bmi: float) -> RiskFactorResult:
    if bmi < 18.5:
        return RiskFactorResult(
            BMI, 2,
            "Your BMI is in the underweight range. Consult a doctor about healthy weight gain.",
        )
    if bmi >= 30:
        return RiskFactorResult(
            BMI, 10,
            "Your BMI is in the obese range. This is a significant risk factor. "
            "Please consult a doctor for a weight management plan.",
        )
    if bmi >= 25:
        return RiskFactorResult(
            BMI, 5,
            "Your BMI is in the overweight range. Focus on portion control and moderate exercise.",
        )
    return _safe(BMI)


def evaluate_waist(waist: float, gender: str) -> RiskFactorResult:
    # Only "Male" gets the higher cut-off; Female and Other share 88 cm.
    threshold = 102 if gender == "Male" else 88
    if waist > threshold:
        return RiskFactorResult(
            WAIST, 7,
            "Your waist circumference is high, indicating increased risk. "
            "Focus on reducing abdominal fat through diet and exercise.",
        )
    return _safe(WAIST)


def evaluate_smoking(smoking: int) -> RiskFactorResult:
    if smoking == 1:
        return RiskFactorResult(
            SMOKING, 10,
            "Smoking is a major risk factor. Quitting is the single best thing "
            "you can do for your heart health.",
        )
    return _safe(SMOKING)


def evaluate_exercise(exercise_hours: float) -> RiskFactorResult:
    if exercise_hours < 2.5:
        return RiskFactorResult(
            EXERCISE, 5,
            "Aim for at least 150 minutes of moderate exercise (like brisk walking) per week.",
        )
    return _safe(EXERCISE)


def evaluate_steps(steps: int) -> RiskFactorResult:
    if steps < 5000:
        return RiskFactorResult(
            STEPS, 3,
            "Your daily step count is low. Try to gradually increase your daily walking.",
        )
    return _safe(STEPS)


def evaluate_diet(junk_food: int) -> RiskFactorResult:
    if junk_food > 3:
        return RiskFactorResult(
            DIET, 4,
            "High intake of junk food is detrimental. Focus on whole foods, fruits, and vegetables.",
        )
    return _safe(DIET)


def evaluate_alcohol(alcohol_units: int, gender: str) -> RiskFactorResult:
    threshold = 14 if gender == "Male" else 7
    if alcohol_units > threshold:
        return RiskFactorResult(
            ALCOHOL, 3,
            "Your alcohol consumption is high. Please consider reducing it to "
            "recommended limits (or less).",
        )
    return _safe(ALCOHOL)


def evaluate_sleep(sleep_hours: float) -> RiskFactorResult:
    if sleep_hours < 6 or sleep_hours > 9:
        return RiskFactorResult(
            SLEEP, 2,
            "Aim for 7-8 hours of quality sleep per night, as poor sleep affects heart health.",
        )
    return _safe(SLEEP)


def evaluate_stress(stress_level: int) -> RiskFactorResult:
    if stress_level == 3:
        return RiskFactorResult(
            STRESS, 3,
            "High stress levels contribute to heart risk. Explore stress-management "
            "techniques like mindfulness, yoga, or hobbies.",
        )
    return _safe(STRESS)


def evaluate_family_history(family_history: int) -> RiskFactorResult:
    if family_history == 1:
        return RiskFactorResult(
            FAMILY_HISTORY, 5,
            "You have a family history of heart disease, making proactive care very important.",
        )
    return _safe(FAMILY_HISTORY)


def evaluate_blood_pressure(high_bp: bool) -> RiskFactorResult:
    if high_bp:
        return RiskFactorResult(
            BLOOD_PRESSURE, 8,
            "Managing your high blood pressure is critical. Follow your doctor's advice carefully.",
        )
    return _safe(BLOOD_PRESSURE)


def evaluate_diabetes(diabetes: bool) -> RiskFactorResult:
    if diabetes:
        return RiskFactorResult(
            DIABETES, 8,
            "Diabetes significantly increases heart risk. Diligent blood sugar control is essential.",
        )
    return _safe(DIABETES)


def evaluate_cholesterol(cholesterol: Optional[int]) -> RiskFactorResult:
    """Absent (or zero) cholesterol is valid and scores nothing."""
    if not cholesterol:
        return _safe(CHOLESTEROL)
    if cholesterol > 240:
        return RiskFactorResult(
            CHOLESTEROL, 8,
            "Your cholesterol is very high. Discuss dietary changes and potential "
            "treatment with your doctor immediately.",
        )
    if cholesterol > 200:
        return RiskFactorResult(
            CHOLESTEROL, 4,
            "Your cholesterol is elevated. Discuss dietary changes and potential "
            "treatment with your doctor.",
        )
    return _safe(CHOLESTEROL)


# (factor, evaluator) in declaration order
EVALUATORS: Tuple[Tuple[str, Callable[[HealthInput], RiskFactorResult]], ...] = (
    (AGE, lambda i: evaluate_age(i.age)),
    (BMI, lambda i: evaluate_bmi(i.bmi)),
    (WAIST, lambda i: evaluate_waist(i.waist, i.gender)),
    (SMOKING, lambda i: evaluate_smoking(i.smoking)),
    (EXERCISE, lambda i: evaluate_exercise(i.exercise)),
    (STEPS, lambda i: evaluate_steps(i.steps)),
    (DIET, lambda i: evaluate_diet(i.junk_food)),
    (ALCOHOL, lambda i: evaluate_alcohol(i.alcohol, i.gender)),
    (SLEEP, lambda i: evaluate_sleep(i.sleep)),
    (STRESS, lambda i: evaluate_stress(i.stress)),
    (FAMILY_HISTORY, lambda i: evaluate_family_history(i.family_history)),
    (BLOOD_PRESSURE, lambda i: evaluate_blood_pressure(i.high_bp)),
    (DIABETES, lambda i: evaluate_diabetes(i.diabetes)),
    (CHOLESTEROL, lambda i: evaluate_cholesterol(i.cholesterol)),
)


def evaluate_factors(health_input: HealthInput) -> List[RiskFactorResult]:
    """Run every evaluator, in declaration order."""
    return [evaluate(health_input) for _, evaluate in EVALUATORS]


def medical_condition_messages(results: List[RiskFactorResult]) -> Optional[str]:
    """Blood pressure and diabetes advice joined for display. Not scored."""
    messages = [
        r.message for r in results
        if r.factor in MEDICAL_CONDITIONS and r.message
    ]
    return " ".join(messages) or None
