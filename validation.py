"""
Validation boundary between raw user input and the plan calculator.

Raw values arrive as strings (HTML form, command line) or JSON scalars.
``parse_plan_input`` either returns a fully-formed ``PlanInput`` or raises a
``PlanInputError``; the calculator is never called with anything else.
Type coercion and bounds live on ``schemas.PlanRequest``; this module only
decides which user-facing error a rejection maps to.
"""
import math
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from models import (
    ACTIVITY_LEVELS,
    GOALS,
    MAX_AGE,
    MAX_HEIGHT_CM,
    MAX_WEIGHT_KG,
    MEAL_COUNTS,
    MIN_AGE,
    MIN_HEIGHT_CM,
    MIN_WEIGHT_KG,
    SEXES,
    PlanInput,
)
from schemas import PlanRequest


MISSING_FIELDS_MESSAGE = "Please fill in all fields before generating your plan."
AGE_RANGE_MESSAGE = f"This calculator is intended for ages between {MIN_AGE} and {MAX_AGE}."

# Form field name -> accepted aliases (JSON callers use the long names)
FIELD_ALIASES = {
    "age": ("age",),
    "sex": ("sex",),
    "height": ("height", "height_cm"),
    "weight": ("weight", "weight_kg"),
    "activity": ("activity", "activity_level"),
    "goal": ("goal",),
    "meals": ("meals", "meals_per_day"),
}

# Form field name -> PlanRequest / PlanInput attribute
MODEL_FIELDS = {
    "age": "age",
    "sex": "sex",
    "height": "height_cm",
    "weight": "weight_kg",
    "activity": "activity_level",
    "goal": "goal",
    "meals": "meals_per_day",
}
FORM_FIELDS = {model: form for form, model in MODEL_FIELDS.items()}

NUMERIC_FIELDS = ("age", "height", "weight", "meals")
CHOICE_FIELDS = ("sex", "activity", "goal")

FIELD_MESSAGES = {
    "age": "Age must be a whole number.",
    "sex": f"Sex must be one of: {', '.join(SEXES)}.",
    "height": f"Height must be between {MIN_HEIGHT_CM:g} and {MAX_HEIGHT_CM:g} cm.",
    "weight": f"Weight must be between {MIN_WEIGHT_KG:g} and {MAX_WEIGHT_KG:g} kg.",
    "activity": f"Activity must be one of: {', '.join(ACTIVITY_LEVELS)}.",
    "goal": f"Goal must be one of: {', '.join(GOALS)}.",
    "meals": f"Meals per day must be one of: {', '.join(str(m) for m in MEAL_COUNTS)}.",
}

RANGE_ERRORS = ("greater_than_equal", "less_than_equal")


class PlanInputError(ValueError):
    def __init__(self, field: Optional[str], message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class MissingFieldError(PlanInputError):
    def __init__(self, field: str):
        super().__init__(field, MISSING_FIELDS_MESSAGE)


class AgeOutOfRangeError(PlanInputError):
    def __init__(self, age: Any):
        super().__init__("age", AGE_RANGE_MESSAGE)
        self.age = age


class InvalidFieldError(PlanInputError):
    pass


def _raw(data: Mapping[str, Any], field: str) -> Any:
    for key in FIELD_ALIASES[field]:
        value = data.get(key)
        if value is None:
            continue
        if isinstance(value, str):
            value = value.strip()
            if not value:
                continue
        return value
    return None


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _blank(field: str, value: Any) -> bool:
    if value is None:
        return True
    if field not in NUMERIC_FIELDS:
        return False
    if isinstance(value, bool):
        return True
    number = _as_number(value)
    # 0 and NaN count as "not filled in", same as an empty box
    return number is not None and (number == 0 or math.isnan(number))


def _collect(data: Mapping[str, Any]) -> Dict[str, Any]:
    values = {}
    for field in FIELD_ALIASES:
        value = _raw(data, field)
        if _blank(field, value):
            raise MissingFieldError(field)
        if field in CHOICE_FIELDS and isinstance(value, str):
            value = value.lower()
        values[MODEL_FIELDS[field]] = value
    return values


def _to_input_error(exc: ValidationError, values: Dict[str, Any]) -> PlanInputError:
    failures = []
    for error in exc.errors():
        field = FORM_FIELDS[error["loc"][0]]
        failures.append((field, error["type"]))

    # Same precedence as the form: unreadable numbers, then age range, then the rest
    for field, _ in failures:
        if field in NUMERIC_FIELDS and _as_number(values[MODEL_FIELDS[field]]) is None:
            return MissingFieldError(field)
    for field, kind in failures:
        if field == "age" and kind in RANGE_ERRORS:
            return AgeOutOfRangeError(values["age"])

    field = failures[0][0]
    return InvalidFieldError(field, FIELD_MESSAGES[field])


def parse_plan_input(data: Mapping[str, Any]) -> PlanInput:
    """
    Turn raw field values into a PlanInput.

    Presence is checked for every field before any range or choice check,
    so a half-filled form always gets the "fill in all fields" message.
    """
    values = _collect(data)

    try:
        request = PlanRequest.model_validate(values)
    except ValidationError as e:
        raise _to_input_error(e, values) from e

    return PlanInput(**request.model_dump())
