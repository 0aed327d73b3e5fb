from dataclasses import asdict, dataclass


SEXES = ("male", "female")
ACTIVITY_LEVELS = ("low", "medium", "high")
GOALS = ("lose", "maintain", "gain")
MEAL_COUNTS = (4, 5)

MIN_AGE = 14
MAX_AGE = 90

# Plausible human ranges; the form suggests 120-220 cm and 35-180 kg
MIN_HEIGHT_CM = 100.0
MAX_HEIGHT_CM = 250.0
MIN_WEIGHT_KG = 30.0
MAX_WEIGHT_KG = 300.0


@dataclass(frozen=True)
class PlanInput:
    age: int
    sex: str                   # male, female
    height_cm: float
    weight_kg: float
    activity_level: str        # low, medium, high
    goal: str                  # lose, maintain, gain
    meals_per_day: int         # 4 or 5


@dataclass(frozen=True)
class PlanResult:
    maintenance_calories: int
    target_calories: int

    daily_protein_grams: int
    daily_carb_grams: int
    daily_fat_grams: int

    protein_per_meal: int
    carbs_per_meal: int
    fats_per_meal: int

    meals_per_day: int

    def to_dict(self) -> dict:
        return asdict(self)
