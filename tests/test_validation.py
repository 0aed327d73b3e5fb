"""Tests for the input validation boundary."""

import pytest

from calculator import compute_plan
from models import PlanInput
from validation import (
    AGE_RANGE_MESSAGE,
    MISSING_FIELDS_MESSAGE,
    AgeOutOfRangeError,
    InvalidFieldError,
    MissingFieldError,
    PlanInputError,
    parse_plan_input,
)


class TestAccepted:
    def test_form_strings(self, valid_form):
        assert parse_plan_input(valid_form) == PlanInput(
            age=28,
            sex="male",
            height_cm=175.0,
            weight_kg=72.0,
            activity_level="medium",
            goal="maintain",
            meals_per_day=4,
        )

    @pytest.mark.parametrize("age", ["14", "90", "45"])
    def test_age_boundaries_inclusive(self, valid_form, age):
        valid_form["age"] = age
        assert parse_plan_input(valid_form).age == int(age)

    @pytest.mark.parametrize("meals", ["4", "5"])
    def test_meal_counts(self, valid_form, meals):
        valid_form["meals"] = meals
        assert parse_plan_input(valid_form).meals_per_day == int(meals)

    @pytest.mark.parametrize(
        "height, weight",
        [("100", "30"), ("250", "300"), ("120", "35"), ("220", "180")],
    )
    def test_measurement_bounds_inclusive(self, valid_form, height, weight):
        valid_form.update(height=height, weight=weight)
        plan_input = parse_plan_input(valid_form)

        assert plan_input.height_cm == float(height)
        assert plan_input.weight_kg == float(weight)
        assert compute_plan(plan_input).target_calories >= 1500

    def test_choices_are_case_insensitive(self, valid_form):
        valid_form.update(sex=" Female ", activity="HIGH", goal="Gain")
        plan_input = parse_plan_input(valid_form)

        assert plan_input.sex == "female"
        assert plan_input.activity_level == "high"
        assert plan_input.goal == "gain"

    def test_json_aliases_and_numbers(self):
        plan_input = parse_plan_input(
            {
                "age": 30,
                "sex": "female",
                "height_cm": 160,
                "weight_kg": 50.5,
                "activity_level": "low",
                "goal": "lose",
                "meals_per_day": 5,
            }
        )

        assert plan_input.height_cm == 160.0
        assert plan_input.weight_kg == 50.5
        assert plan_input.meals_per_day == 5


class TestRejected:
    @pytest.mark.parametrize("field", ["age", "sex", "height", "weight", "activity", "goal", "meals"])
    def test_missing_field(self, valid_form, field):
        del valid_form[field]

        with pytest.raises(MissingFieldError) as exc:
            parse_plan_input(valid_form)

        assert exc.value.field == field
        assert exc.value.message == MISSING_FIELDS_MESSAGE

    @pytest.mark.parametrize("field", ["age", "height", "weight", "meals"])
    def test_blank_or_zero_counts_as_missing(self, valid_form, field):
        valid_form[field] = "   "
        with pytest.raises(MissingFieldError):
            parse_plan_input(valid_form)

        valid_form[field] = "0"
        with pytest.raises(MissingFieldError):
            parse_plan_input(valid_form)

    def test_unparseable_number_counts_as_missing(self, valid_form):
        valid_form["weight"] = "seventy"
        with pytest.raises(MissingFieldError):
            parse_plan_input(valid_form)

    @pytest.mark.parametrize("age", ["13", "91", "12", "-5"])
    def test_age_out_of_range(self, valid_form, age):
        valid_form["age"] = age

        with pytest.raises(AgeOutOfRangeError) as exc:
            parse_plan_input(valid_form)

        assert exc.value.message == AGE_RANGE_MESSAGE

    def test_missing_wins_over_age_range(self, valid_form):
        valid_form["age"] = "12"
        del valid_form["goal"]

        with pytest.raises(MissingFieldError):
            parse_plan_input(valid_form)

    def test_fractional_age(self, valid_form):
        valid_form["age"] = "30.5"
        with pytest.raises(InvalidFieldError):
            parse_plan_input(valid_form)

    @pytest.mark.parametrize("meals", ["6", "3", "4.5"])
    def test_bad_meal_count(self, valid_form, meals):
        valid_form["meals"] = meals

        with pytest.raises(InvalidFieldError) as exc:
            parse_plan_input(valid_form)

        assert exc.value.field == "meals"

    @pytest.mark.parametrize("meals", ["0", "four"])
    def test_zero_or_unreadable_meals_count_as_missing(self, valid_form, meals):
        valid_form["meals"] = meals

        with pytest.raises(MissingFieldError) as exc:
            parse_plan_input(valid_form)

        assert exc.value.field == "meals"

    @pytest.mark.parametrize(
        "field, value",
        [
            ("height", "99.9"),
            ("height", "250.1"),
            ("height", "0.0001"),
            ("height", "1e308"),
            ("height", "inf"),
            ("weight", "29.9"),
            ("weight", "300.1"),
            ("weight", "5000"),
        ],
    )
    def test_implausible_measurements(self, valid_form, field, value):
        valid_form[field] = value

        with pytest.raises(InvalidFieldError) as exc:
            parse_plan_input(valid_form)

        assert exc.value.field == field

    def test_height_message_names_the_range(self, valid_form):
        valid_form["height"] = "1e308"

        with pytest.raises(InvalidFieldError) as exc:
            parse_plan_input(valid_form)

        assert exc.value.message == "Height must be between 100 and 250 cm."

    @pytest.mark.parametrize(
        "field, value",
        [("sex", "other"), ("activity", "extreme"), ("goal", "bulk")],
    )
    def test_unknown_choice(self, valid_form, field, value):
        valid_form[field] = value

        with pytest.raises(InvalidFieldError) as exc:
            parse_plan_input(valid_form)

        assert exc.value.field == field

    @pytest.mark.parametrize("field", ["height", "weight"])
    def test_negative_measurements(self, valid_form, field):
        valid_form[field] = "-70"
        with pytest.raises(InvalidFieldError):
            parse_plan_input(valid_form)

    def test_errors_are_value_errors(self, valid_form):
        valid_form["age"] = "95"
        with pytest.raises(ValueError):
            parse_plan_input(valid_form)
        assert issubclass(PlanInputError, ValueError)
