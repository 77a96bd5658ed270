"""
Simulated "AI-style" 10-year risk percentage.

Decorative only: the value is noisy on purpose and must never feed scoring,
storage or trend analysis.
"""
import random
from typing import Optional

MIN_PERCENT = 1.0
MAX_PERCENT = 95.0
JITTER = 2.5

_rng = random.Random()


def predict_simulated_risk(
    total_score: int,
    age: int,
    rng: Optional[random.Random] = None,
) -> float:
    """Percentage in [1, 95] derived from the composite score and age."""
    rng = rng or _rng
    base = (total_score / 60) * 50
    jitter = rng.uniform(-JITTER, JITTER)
    raw = base + jitter + age / 10
    return max(MIN_PERCENT, min(MAX_PERCENT, raw))


def format_simulated_risk(percent: float) -> str:
    return f"{percent:.1f}% 10-year risk (simulated)"
