"""Command-line front end for the plan calculator.

Example:
    macro-planner --age 28 --sex male --height 175 --weight 72 \
        --activity medium --goal maintain --meals 4
"""
import argparse
import json
import sys
from typing import List, Optional

from calculator import compute_plan, goal_copy
from models import PlanResult
from validation import PlanInputError, parse_plan_input


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="macro-planner",
        description="Daily calories, macros and a per-meal split.",
    )
    parser.add_argument("--age", required=True, help="years, 14-90")
    parser.add_argument("--sex", required=True, help="male or female")
    parser.add_argument("--height", required=True, help="height in cm")
    parser.add_argument("--weight", required=True, help="weight in kg")
    parser.add_argument("--activity", required=True, help="low, medium or high")
    parser.add_argument("--goal", required=True, help="lose, maintain or gain")
    parser.add_argument("--meals", default="4", help="4 or 5 (default: 4)")
    parser.add_argument("--json", dest="as_json", action="store_true", help="print JSON")
    return parser


def format_plan(plan: PlanResult, goal: str) -> str:
    copy = goal_copy(goal)
    return "\n".join(
        [
            f"Daily targets for {copy['label']}",
            f"  Maintenance calories: {plan.maintenance_calories:,} kcal/day",
            f"  Target calories:      {plan.target_calories:,} kcal/day",
            f"  Daily macros:         {plan.daily_protein_grams}P / "
            f"{plan.daily_carb_grams}C / {plan.daily_fat_grams}F (g)",
            f"  Per meal (x{plan.meals_per_day}):        {plan.protein_per_meal}P / "
            f"{plan.carbs_per_meal}C / {plan.fats_per_meal}F (g)",
            "",
            copy["explanation"],
        ]
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        plan_input = parse_plan_input(vars(args))
    except PlanInputError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return 2

    plan = compute_plan(plan_input)

    if args.as_json:
        print(json.dumps(plan.to_dict(), indent=2))
    else:
        print(format_plan(plan, plan_input.goal))
    return 0


if __name__ == "__main__":
    sys.exit(main())
