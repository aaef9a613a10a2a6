#!/usr/bin/env python3
"""
Fitness Planner CLI.

Daily nutrition targets and weekly strength plans from the terminal.

Usage:
    fitness-planner macros --age 25 --sex male --height-cm 180 --weight 80
    fitness-planner plans --goal gain_muscle --days monday,wednesday,friday --duration 60
    fitness-planner exercises --group chest
"""

import argparse
import sys
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from .exceptions import FitnessPlannerError
from .logging_config import configure_logging
from .metrics.units import feet_inches_to_cm, lbs_to_kg
from .models.nutrition import (
    ActivityLevel,
    BiometricProfile,
    MacroPreference,
    Sex,
    WeightGoal,
)
from .models.workouts import (
    BodyFocus,
    ExperienceLevel,
    FitnessGoal,
    FocusMode,
    MuscleGroup,
    Weekday,
    WorkoutPreferences,
)
from .services.macro_service import MacroService
from .services.plan_service import WorkoutPlanService

console = Console()


def _choices(enum_cls) -> List[str]:
    return [member.value for member in enum_cls]


def _csv_enum(enum_cls):
    """argparse type for comma separated enum values."""
    def parse(value: str) -> List[str]:
        items = [item.strip().lower() for item in value.split(",") if item.strip()]
        allowed = set(_choices(enum_cls))
        invalid = [item for item in items if item not in allowed]
        if invalid:
            raise argparse.ArgumentTypeError(
                f"invalid value(s) {', '.join(invalid)}; choose from {', '.join(sorted(allowed))}"
            )
        return items
    return parse


def cmd_macros(args, service: MacroService) -> None:
    """Calculate and display daily macro targets."""
    if args.height_cm is not None:
        height_cm = args.height_cm
    else:
        height_cm = feet_inches_to_cm(args.height_ft, args.height_in or 0.0)
    weight_kg = lbs_to_kg(args.weight) if args.lbs else args.weight

    profile = BiometricProfile(
        age=args.age,
        sex=Sex(args.sex),
        height_cm=height_cm,
        weight_kg=weight_kg,
        activity_level=ActivityLevel(args.activity),
        weight_goal=WeightGoal(args.goal),
        weight_change_rate=args.rate if args.goal != WeightGoal.MAINTAIN.value else 0.0,
        macro_preference=MacroPreference(args.preference),
    )
    calculation = service.calculate(profile)
    targets = calculation.targets

    console.print()
    console.print(Panel("[bold]Fitness Planner - Macro Targets[/bold]"))

    energy = Table(title="Energy", box=box.ROUNDED)
    energy.add_column("Metric", style="cyan")
    energy.add_column("kcal/day", justify="right")
    energy.add_row("BMR", str(targets.bmr))
    energy.add_row("TDEE", str(targets.tdee))
    energy.add_row("Target", f"[bold]{targets.target_calories}[/bold]")
    console.print(energy)

    macros = Table(title="Macros", box=box.ROUNDED)
    macros.add_column("Macro", style="cyan")
    macros.add_column("Grams", justify="right")
    macros.add_column("kcal", justify="right")
    macros.add_row("Protein", str(targets.protein_g), str(targets.protein_kcal))
    macros.add_row("Carbs", str(targets.carbs_g), str(targets.carbs_kcal))
    macros.add_row("Fat", str(targets.fat_g), str(targets.fat_kcal))
    console.print(macros)

    for warning in targets.warnings:
        console.print(f"[yellow]Warning: {warning}[/yellow]")
    console.print()


def cmd_plans(args, service: WorkoutPlanService) -> None:
    """Generate and display three workout plans."""
    preferences = WorkoutPreferences(
        fitness_goal=FitnessGoal(args.goal),
        workout_days=args.days,
        workout_duration=args.duration,
        body_focus=args.focus or [],
        experience_level=ExperienceLevel(args.level),
    )
    mode = FocusMode(args.mode) if args.mode else None
    plans = service.generate(preferences, mode=mode, seed=args.seed)

    console.print()
    for index, plan in enumerate(plans, start=1):
        console.print(Panel(
            f"[bold]{plan.name}[/bold]  ({plan.difficulty.value}, "
            f"~{plan.avg_duration} min, {plan.total_exercises} exercises)\n{plan.description}",
            title=f"Plan {index}",
        ))
        for day in plan.weekly_schedule:
            table = Table(title=f"{day.day} - {day.focus}", box=box.SIMPLE)
            table.add_column("Exercise", style="cyan")
            table.add_column("Group")
            table.add_column("Sets x Reps", justify="right")
            for exercise in day.exercises:
                table.add_row(
                    exercise.name,
                    exercise.muscle_group.value,
                    f"{exercise.sets} x {exercise.reps}",
                )
            console.print(table)
        for highlight in plan.highlights:
            console.print(f"  - {highlight}")
        console.print()


def cmd_exercises(args, service: WorkoutPlanService) -> None:
    """List the exercise catalog."""
    if args.group:
        catalog = {MuscleGroup(args.group): service.exercises_for(args.group)}
    else:
        catalog = service.exercise_catalog()

    for group, entries in catalog.items():
        table = Table(title=group.value.title(), box=box.ROUNDED)
        table.add_column("Exercise", style="cyan")
        table.add_column("Equipment")
        table.add_column("Difficulty")
        for entry in entries:
            table.add_row(entry.name, entry.equipment.value, entry.difficulty.value)
        console.print(table)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="fitness-planner",
        description="Fitness Planner - nutrition targets and strength plans",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  fitness-planner macros --age 25 --sex male --height-cm 180 --weight 80 --activity sedentary
  fitness-planner macros --age 30 --sex female --height-ft 5 --height-in 6 --weight 150 --lbs --goal lose --rate 0.5
  fitness-planner plans --goal gain_muscle --days monday,tuesday,thursday,friday --duration 60 --level intermediate
  fitness-planner exercises --group core
        """,
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default from settings)")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Macros command
    macros_p = subparsers.add_parser("macros", help="Calculate daily macro targets")
    macros_p.add_argument("--age", type=int, required=True, help="Age in years")
    macros_p.add_argument("--sex", choices=_choices(Sex), required=True)
    height = macros_p.add_mutually_exclusive_group(required=True)
    height.add_argument("--height-cm", type=float, help="Height in centimeters")
    height.add_argument("--height-ft", type=float, help="Height in feet (combine with --height-in)")
    macros_p.add_argument("--height-in", type=float, help="Additional inches (with --height-ft)")
    macros_p.add_argument("--weight", type=float, required=True, help="Body weight (kg unless --lbs)")
    macros_p.add_argument("--lbs", action="store_true", help="Weight is given in pounds")
    macros_p.add_argument(
        "--activity",
        choices=_choices(ActivityLevel),
        default=ActivityLevel.SEDENTARY.value,
    )
    macros_p.add_argument("--goal", choices=_choices(WeightGoal), default=WeightGoal.MAINTAIN.value)
    macros_p.add_argument("--rate", type=float, default=0.0, help="Weight change in kg per week")
    macros_p.add_argument(
        "--preference",
        choices=_choices(MacroPreference),
        default=MacroPreference.BALANCED.value,
    )

    # Plans command
    plans_p = subparsers.add_parser("plans", help="Generate three workout plans")
    plans_p.add_argument("--goal", choices=_choices(FitnessGoal), required=True)
    plans_p.add_argument(
        "--days",
        type=_csv_enum(Weekday),
        required=True,
        help="Comma separated weekdays, in order (e.g. monday,wednesday,friday)",
    )
    plans_p.add_argument("--duration", type=int, default=60, help="Session length in minutes (20-180)")
    plans_p.add_argument(
        "--level",
        choices=_choices(ExperienceLevel),
        default=ExperienceLevel.BEGINNER.value,
    )
    plans_p.add_argument(
        "--focus",
        type=_csv_enum(BodyFocus),
        help="Comma separated focus areas (used in focused mode)",
    )
    plans_p.add_argument("--mode", choices=_choices(FocusMode), help="Override the focus mode")
    plans_p.add_argument("--seed", type=int, help="Seed for reproducible exercise selection")

    # Exercises command
    exercises_p = subparsers.add_parser("exercises", help="List the exercise catalog")
    exercises_p.add_argument("--group", choices=_choices(MuscleGroup))

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "macros" and args.height_in is not None and args.height_ft is None:
        parser.error("--height-in requires --height-ft")
    configure_logging(args.log_level)

    try:
        if args.command == "macros":
            cmd_macros(args, MacroService())
        elif args.command == "plans":
            cmd_plans(args, WorkoutPlanService())
        elif args.command == "exercises":
            cmd_exercises(args, WorkoutPlanService())
        else:
            parser.print_help()
            return 1
    except FitnessPlannerError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
