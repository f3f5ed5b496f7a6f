from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

DEFAULT_WATER_GOAL_ML = 2000
ML_PER_KG = 33


@dataclass(frozen=True)
class BmiInfo:
    bmi: float  # rounded to one decimal
    category: str


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_water_goal(weight_kg: Optional[float], height_cm: Optional[float]) -> int:
    """Daily water goal in ml: 33 ml per kg of body weight.

    Height is required to be known but does not enter the formula.
    """
    if not weight_kg or not height_cm:
        return DEFAULT_WATER_GOAL_ML
    goal = weight_kg * ML_PER_KG
    if not math.isfinite(goal):
        return DEFAULT_WATER_GOAL_ML
    return round_half_up(goal)


def bmi_category(bmi: float) -> str:
    if bmi < 18.5:
        return "Underweight"
    if bmi < 25:
        return "Normal weight"
    if bmi < 30:
        return "Overweight"
    return "Obese"


def get_bmi_info(weight_kg: Optional[float], height_cm: Optional[float]) -> Optional[BmiInfo]:
    if not weight_kg or not height_cm:
        return None
    bmi = weight_kg / ((height_cm / 100) ** 2)
    # category comes from the unrounded value so 24.96 stays "Normal weight"
    return BmiInfo(bmi=round(bmi, 1), category=bmi_category(bmi))
