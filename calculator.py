import math
from typing import Tuple

from models import PlanInput, PlanResult


ACTIVITY_MAP = {
    "low": 1.3,
    "medium": 1.5,
    "high": 1.7,
}

GOAL_ADJUSTMENT = {
    "lose": -300,
    "maintain": 0,
    "gain": 300,
}

CALORIE_FLOOR = {
    "female": 1200,
    "male": 1500,
}

# Share of target calories, then kcal per gram
PROTEIN_SHARE = 0.30
CARB_SHARE = 0.45
FAT_SHARE = 0.25

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARB = 4
KCAL_PER_G_FAT = 9

GOAL_COPY = {
    "lose": {
        "label": "fat loss",
        "explanation": "We reduced ~300 kcal below maintenance to create a gentle, sustainable deficit.",
    },
    "maintain": {
        "label": "maintenance",
        "explanation": "We keep you close to maintenance so you can maintain weight while improving strength and habits.",
    },
    "gain": {
        "label": "muscle gain",
        "explanation": "We added ~300 kcal above maintenance to support muscle growth without excessive fat gain.",
    },
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up (2.5 -> 3, 17.5 -> 18)."""
    return int(math.floor(value + 0.5))


def goal_copy(goal: str) -> dict:
    return GOAL_COPY.get(
        goal,
        {
            "label": "your goal",
            "explanation": "We gently adjust calories based on your goal so results are sustainable.",
        },
    )


class PlanCalculator:
    """
    Core logic:
    - Compute BMR (Mifflin-St Jeor)
    - Apply activity factor -> maintenance calories
    - Adjust for goal (+/- 300 kcal), then clamp to the sex-specific floor
    - Split target calories 30/45/25 into protein, carb and fat grams
    - Divide daily grams evenly across meals

    Every rounding step is independent; nothing is carried forward to
    correct drift. Inputs are assumed to be validated already.
    """

    def _bmr(self, sex: str, age: int, weight_kg: float, height_cm: float) -> float:
        offset = 5 if sex == "male" else -161
        return 10 * weight_kg + 6.25 * height_cm - 5 * age + offset

    def _maintenance(self, bmr: float, activity_level: str) -> int:
        return round_half_up(bmr * ACTIVITY_MAP[activity_level])

    def _goal_target(self, maintenance: int, goal: str) -> int:
        return maintenance + GOAL_ADJUSTMENT[goal]

    def _apply_floor(self, target: int, sex: str) -> int:
        floor = CALORIE_FLOOR[sex]
        if target < floor:
            return floor
        return target

    def _macros(self, calories: int) -> Tuple[int, int, int]:
        """
        Returns: (protein_g, carb_g, fat_g)
        """
        protein_kcal = calories * PROTEIN_SHARE
        carb_kcal = calories * CARB_SHARE
        fat_kcal = calories * FAT_SHARE

        return (
            round_half_up(protein_kcal / KCAL_PER_G_PROTEIN),
            round_half_up(carb_kcal / KCAL_PER_G_CARB),
            round_half_up(fat_kcal / KCAL_PER_G_FAT),
        )

    def _per_meal(self, grams: int, meals: int) -> int:
        return round_half_up(grams / meals)

    def calculate_plan(self, plan_input: PlanInput) -> PlanResult:
        # BMR
        bmr = self._bmr(
            plan_input.sex,
            plan_input.age,
            plan_input.weight_kg,
            plan_input.height_cm,
        )

        # Maintenance
        maintenance = self._maintenance(bmr, plan_input.activity_level)

        # Target: goal first, floor last
        target = self._goal_target(maintenance, plan_input.goal)
        target = self._apply_floor(target, plan_input.sex)

        # Macros
        protein_g, carb_g, fat_g = self._macros(target)

        meals = plan_input.meals_per_day

        return PlanResult(
            maintenance_calories=maintenance,
            target_calories=target,
            daily_protein_grams=protein_g,
            daily_carb_grams=carb_g,
            daily_fat_grams=fat_g,
            protein_per_meal=self._per_meal(protein_g, meals),
            carbs_per_meal=self._per_meal(carb_g, meals),
            fats_per_meal=self._per_meal(fat_g, meals),
            meals_per_day=meals,
        )


_calculator = PlanCalculator()


def compute_plan(plan_input: PlanInput) -> PlanResult:
    return _calculator.calculate_plan(plan_input)
