"""Shared fixtures for the macro planner tests."""

import pytest

from models import PlanInput


@pytest.fixture
def make_input():
    """Build a PlanInput from the first reference scenario, with overrides."""

    def _make(**overrides) -> PlanInput:
        fields = dict(
            age=28,
            sex="male",
            height_cm=175.0,
            weight_kg=72.0,
            activity_level="medium",
            goal="maintain",
            meals_per_day=4,
        )
        fields.update(overrides)
        return PlanInput(**fields)

    return _make


@pytest.fixture
def valid_form():
    return {
        "age": "28",
        "sex": "male",
        "height": "175",
        "weight": "72",
        "activity": "medium",
        "goal": "maintain",
        "meals": "4",
    }
