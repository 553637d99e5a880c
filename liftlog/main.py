"""
Main entry point for workout tracking.

Provides CLI interface for logging exercises into named workouts,
managing saved workouts, and running volume analysis.
"""

import sys
import logging
import argparse

from .config import AppConfig
from .errors import LiftlogError, NotFoundError
from .models import Exercise, Workout, WorkoutComparison, MuscleCategory
from .storage import WorkoutStorage
from .analyzer import (
    top_n,
    bottom_n,
    volume_percentage_split,
    summarize_workout,
    compare_workouts,
)
from .visualizations import plot_volume_breakdown, plot_muscle_split, plot_comparison


logger = logging.getLogger(__name__)


def format_percent(value: float) -> str:
    """Format a fraction as a percentage with two decimals."""
    return f"{value * 100:.2f}%"


def print_workout(workout: Workout) -> None:
    """
    Print the numbered exercise list and summary of a workout.

    Parameters:
        workout: Workout to print.
    """
    print("\n" + "=" * 60)
    print(workout.name.upper())
    print("=" * 60)

    if not workout.exercises:
        print("\n   The workout has no exercises added.")
        print("\n" + "=" * 60)
        return

    print()
    for i, e in enumerate(workout.exercises, start=1):
        print(
            f"   {i}. {e.name}: {e.sets} x {e.reps} @ {e.weight:g} lbs "
            f"({e.muscle_group}) = {e.volume:,.0f} lbs"
        )

    summary = summarize_workout(workout)
    highest = summary.highest_volume_exercise
    print(f"\n   Total sets: {summary.total_sets}")
    print(f"   Total reps: {summary.total_reps}")
    print(f"   Total volume: {summary.total_volume:,.0f} lbs")
    print(f"   Highest volume exercise: {highest.name} ({highest.volume:,.0f} lbs)")
    print("\n" + "=" * 60)


def print_analytics(workout: Workout, n: int) -> None:
    """
    Print rankings, split and highest-volume exercise of a workout.

    Parameters:
        workout: Non-empty workout to analyze.
        n: Number of exercises in the top and bottom rankings.
    """
    print("\n" + "=" * 60)
    print(f"{workout.name.upper()} ANALYTICS")
    print("=" * 60)

    print(f"\n   Top {n} exercises by volume:")
    for e, fraction in top_n(workout, n):
        print(f"     {e.name}: {format_percent(fraction)}")

    print(f"\n   Bottom {n} exercises by volume:")
    bottom = bottom_n(workout, n)
    if not bottom:
        print(f"     Not enough exercises to display the bottom {n}.")
    for e, fraction in bottom:
        print(f"     {e.name}: {format_percent(fraction)}")

    print("\n   Push / Pull / Legs split:")
    for category, fraction in volume_percentage_split(workout).items():
        print(f"     {category.value}: {format_percent(fraction)}")

    other = [e.name for e in workout.exercises if e.category is MuscleCategory.OTHER]
    if other:
        print(f"     (not counted: {', '.join(other)})")

    highest = summarize_workout(workout).highest_volume_exercise
    print(f"\n   Highest volume exercise: {highest.name} ({highest.volume:,.0f} lbs)")
    print("\n" + "=" * 60)


def print_comparison(result: WorkoutComparison) -> None:
    """
    Print a comparison between two workouts.

    Parameters:
        result: Comparison to print.
    """
    print("\n" + "=" * 60)
    print(f"{result.name_a} V.S {result.name_b}")
    print("=" * 60)

    print(f"\n   {result.name_a}: {result.volume_a:,.0f} lbs")
    print(f"   {result.name_b}: {result.volume_b:,.0f} lbs")

    if result.larger is None:
        print("\n   No difference in volume")
    else:
        winner = result.name_a if result.larger == "a" else result.name_b
        percent = result.volume_difference_as_percent
        percent_text = "n/a" if percent is None else f"+{format_percent(percent)}"
        print(
            f"\n   {winner} volume was greater by "
            f"+{result.volume_difference:,.0f} lbs ({percent_text})"
        )

    sections = [
        ("Common exercises", result.common_exercises),
        (f"Unique to {result.name_a}", result.unique_to_a),
        (f"Unique to {result.name_b}", result.unique_to_b),
    ]
    for title, names in sections:
        print(f"\n   {title}:")
        if not names:
            print("     None")
        for name in sorted(names):
            print(f"     - {name}")

    print("\n" + "=" * 60)


def _load_or_create(storage: WorkoutStorage, name: str) -> Workout:
    try:
        return storage.load(name)
    except NotFoundError:
        logger.info(f"Creating new workout '{name}'")
        return Workout(name=name)


def _chart_stem(workout: Workout) -> str:
    """File name stem for a workout's chart images."""
    stem = "".join(ch if ch.isalnum() else "_" for ch in workout.name.lower())
    return stem.strip("_") or "workout"


def _save(storage: WorkoutStorage, workout: Workout) -> None:
    if not storage.save(workout):
        raise SystemExit(1)


def cmd_list(
    args: argparse.Namespace, config: AppConfig, storage: WorkoutStorage
) -> None:
    """List saved workouts."""
    names = storage.list()
    if not names:
        print("No saved workouts found")
        return

    for i, name in enumerate(names, start=1):
        print(f"{i}. {name}")


def cmd_show(
    args: argparse.Namespace, config: AppConfig, storage: WorkoutStorage
) -> None:
    """Show exercises and summary of a saved workout."""
    print_workout(storage.load(args.name))


def cmd_add(
    args: argparse.Namespace, config: AppConfig, storage: WorkoutStorage
) -> None:
    """Add exercises to a workout, creating it if needed."""
    workout = _load_or_create(storage, args.name)
    for text in args.exercises:
        workout.add_exercise(Exercise.from_string(text))

    _save(storage, workout)
    print(f"Added {len(args.exercises)} exercise(s) to '{workout.name}'")


def _exercise_index(workout: Workout, number: int) -> int:
    if not 1 <= number <= workout.size:
        raise SystemExit(
            f"Exercise number must be between 1 and {workout.size} for '{workout.name}'"
        )
    return number - 1


def cmd_edit(
    args: argparse.Namespace, config: AppConfig, storage: WorkoutStorage
) -> None:
    """Edit fields of one exercise in a saved workout."""
    workout = storage.load(args.name)
    index = _exercise_index(workout, args.index)

    changes = {
        key: value
        for key, value in {
            "name": args.exercise_name,
            "sets": args.sets,
            "reps": args.reps,
            "weight": args.weight,
            "muscle_group": args.muscle_group,
        }.items()
        if value is not None
    }
    if not changes:
        print("Nothing to change")
        return

    updated = workout.update_exercise(index, **changes)
    _save(storage, workout)
    print(f"Exercise updated: {updated.name}")


def cmd_remove(
    args: argparse.Namespace, config: AppConfig, storage: WorkoutStorage
) -> None:
    """Remove one exercise from a saved workout."""
    workout = storage.load(args.name)
    removed = workout.remove_exercise(_exercise_index(workout, args.index))
    _save(storage, workout)
    print(f"Removed {removed.name} from '{workout.name}'")


def cmd_analyze(
    args: argparse.Namespace, config: AppConfig, storage: WorkoutStorage
) -> None:
    """Show volume analytics for a saved workout."""
    workout = storage.load(args.name)
    if not workout.exercises:
        print("The workout has no exercises added.")
        return

    print_analytics(workout, args.top)


def cmd_compare(
    args: argparse.Namespace, config: AppConfig, storage: WorkoutStorage
) -> None:
    """Compare two saved workouts."""
    a = storage.load(args.first)
    b = storage.load(args.second)
    print_comparison(compare_workouts(a, b))


def cmd_delete(
    args: argparse.Namespace, config: AppConfig, storage: WorkoutStorage
) -> None:
    """Delete a saved workout."""
    if storage.delete(args.name):
        print("Workout deleted.")
    else:
        print("Failed to delete workout.")
        raise SystemExit(1)


def cmd_visualize(
    args: argparse.Namespace, config: AppConfig, storage: WorkoutStorage
) -> None:
    """Generate charts for one workout, or a comparison of two."""
    output_dir = config.paths.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)

    show = not args.no_show
    workout = storage.load(args.name)

    logger.info(f"Generating charts for '{workout.name}'...")
    stem = _chart_stem(workout)
    plot_volume_breakdown(workout, output_dir / f"{stem}_breakdown.png", show)
    plot_muscle_split(workout, output_dir / f"{stem}_split.png", show)

    if args.compare_with:
        other = storage.load(args.compare_with)
        plot_comparison(
            workout, other, output_dir / f"{stem}_vs_{_chart_stem(other)}.png", show
        )


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(description="Strength workout tracking and analysis")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("list", help="List saved workouts")

    show_parser = subparsers.add_parser("show", help="Show a saved workout")
    show_parser.add_argument("name", help="Workout name")

    add_parser = subparsers.add_parser("add", help="Add exercises to a workout")
    add_parser.add_argument("name", help="Workout name (created if missing)")
    add_parser.add_argument(
        "exercises",
        nargs="+",
        metavar="EXERCISE",
        help='Exercise as "name,sets,reps,weight,muscle group"',
    )

    edit_parser = subparsers.add_parser("edit", help="Edit an exercise")
    edit_parser.add_argument("name", help="Workout name")
    edit_parser.add_argument("index", type=int, help="Exercise number as shown by 'show'")
    edit_parser.add_argument("--name", dest="exercise_name", help="New exercise name")
    edit_parser.add_argument("--sets", type=int, help="New number of sets")
    edit_parser.add_argument("--reps", type=int, help="New number of reps")
    edit_parser.add_argument("--weight", type=float, help="New weight")
    edit_parser.add_argument("--muscle-group", help="New muscle group")

    remove_parser = subparsers.add_parser("remove", help="Remove an exercise")
    remove_parser.add_argument("name", help="Workout name")
    remove_parser.add_argument("index", type=int, help="Exercise number as shown by 'show'")

    analyze_parser = subparsers.add_parser("analyze", help="Show workout analytics")
    analyze_parser.add_argument("name", help="Workout name")
    analyze_parser.add_argument(
        "--top", type=int, default=3, help="Number of exercises to rank (default: 3)"
    )

    compare_parser = subparsers.add_parser("compare", help="Compare two workouts")
    compare_parser.add_argument("first", help="First workout name")
    compare_parser.add_argument("second", help="Second workout name")

    delete_parser = subparsers.add_parser("delete", help="Delete a saved workout")
    delete_parser.add_argument("name", help="Workout name")

    viz_parser = subparsers.add_parser("visualize", help="Generate charts")
    viz_parser.add_argument("name", help="Workout name")
    viz_parser.add_argument("--compare-with", help="Second workout for a comparison chart")
    viz_parser.add_argument(
        "--no-show", action="store_true", help="Save plots without displaying"
    )

    return parser


COMMANDS = {
    "list": cmd_list,
    "show": cmd_show,
    "add": cmd_add,
    "edit": cmd_edit,
    "remove": cmd_remove,
    "analyze": cmd_analyze,
    "compare": cmd_compare,
    "delete": cmd_delete,
    "visualize": cmd_visualize,
}


def main(argv=None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        config = AppConfig.load()
    except ValueError as e:
        parser.exit(1, f"{parser.prog}: error: {e}\n")

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if getattr(args, "top", 0) < 0:
        parser.error("--top must not be negative")

    storage = WorkoutStorage(config.paths.data_dir)

    try:
        COMMANDS[args.command](args, config, storage)
    except LiftlogError as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
