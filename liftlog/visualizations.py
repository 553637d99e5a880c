"""
Workout data visualization.

Provides functions for charting volume breakdowns, push/pull/legs
splits and workout comparisons with matplotlib.
"""

import logging
from pathlib import Path
from typing import Optional

import matplotlib.pyplot as plt
import numpy as np

from .models import Workout
from .analyzer import volume_breakdown, volume_percentage_split


logger = logging.getLogger(__name__)

# plot styling
plt.style.use("seaborn-v0_8-whitegrid")
COLORS = {
    "primary": "#2563eb",
    "secondary": "#64748b",
    "accent": "#f59e0b",
    "success": "#10b981",
}


def _finish(output_path: Optional[Path], show: bool) -> None:
    plt.tight_layout()

    if output_path:
        plt.savefig(output_path, dpi=150, bbox_inches="tight")
        logger.info(f"Saved plot to {output_path}")

    if show:
        plt.show()
    else:
        plt.close()


def plot_volume_breakdown(
    workout: Workout,
    output_path: Optional[Path] = None,
    show: bool = True,
) -> None:
    """
    Plot each exercise's share of workout volume.

    Parameters:
        workout: Workout to chart.
        output_path: Optional path to save the figure.
        show: Whether to display the plot.
    """
    breakdown = volume_breakdown(workout)

    if not breakdown:
        logger.warning(f"No volume data to plot for '{workout.name}'")
        return

    fig, ax = plt.subplots(figsize=(10, max(3, 0.5 * len(breakdown) + 1)))

    y = np.arange(len(breakdown))
    shares = [fraction * 100 for _, fraction in breakdown]
    labels = [f"{i + 1}. {e.name}" for i, (e, _) in enumerate(breakdown)]

    ax.barh(y, shares, color=COLORS["primary"], alpha=0.8)
    ax.set_yticks(y)
    ax.set_yticklabels(labels)
    ax.invert_yaxis()

    ax.set_xlabel("Share of volume (%)", fontsize=11)
    ax.set_title(f"{workout.name}: Volume Breakdown", fontsize=14, fontweight="bold")
    ax.grid(True, alpha=0.3, axis="x")

    _finish(output_path, show)


def plot_muscle_split(
    workout: Workout,
    output_path: Optional[Path] = None,
    show: bool = True,
) -> None:
    """
    Plot the push/pull/legs volume split of a workout.

    Parameters:
        workout: Workout to chart.
        output_path: Optional path to save the figure.
        show: Whether to display the plot.
    """
    if workout.total_volume == 0:
        logger.warning(f"No volume data to plot for '{workout.name}'")
        return

    split = volume_percentage_split(workout)

    fig, ax = plt.subplots(figsize=(8, 6))

    categories = [c.value for c in split]
    shares = [fraction * 100 for fraction in split.values()]
    colors = [COLORS["primary"], COLORS["accent"], COLORS["success"]]

    bars = ax.bar(categories, shares, color=colors, alpha=0.8)
    for bar, share in zip(bars, shares):
        ax.annotate(
            f"{share:.1f}%",
            (bar.get_x() + bar.get_width() / 2, bar.get_height()),
            ha="center",
            va="bottom",
            fontsize=10,
        )

    ax.set_ylim(0, 100)
    ax.set_ylabel("Share of volume (%)", fontsize=11)
    ax.set_title(f"{workout.name}: Push / Pull / Legs", fontsize=14, fontweight="bold")
    ax.grid(True, alpha=0.3, axis="y")

    _finish(output_path, show)


def plot_comparison(
    a: Workout,
    b: Workout,
    output_path: Optional[Path] = None,
    show: bool = True,
) -> None:
    """
    Plot per-exercise volume of two workouts side by side.

    Exercises with the same name are summed within each workout.

    Parameters:
        a: First workout.
        b: Second workout.
        output_path: Optional path to save the figure.
        show: Whether to display the plot.
    """
    names = list(dict.fromkeys(a.exercise_names + b.exercise_names))

    if not names:
        logger.warning("No exercises to compare")
        return

    def volumes(workout: Workout) -> list:
        totals = dict.fromkeys(names, 0.0)
        for e in workout.exercises:
            totals[e.name] += e.volume
        return [totals[n] for n in names]

    fig, ax = plt.subplots(figsize=(max(8, len(names) * 1.2), 6))

    x = np.arange(len(names))
    width = 0.4

    ax.bar(x - width / 2, volumes(a), width, color=COLORS["primary"], label=a.name)
    ax.bar(x + width / 2, volumes(b), width, color=COLORS["accent"], label=b.name)

    ax.set_xticks(x)
    ax.set_xticklabels(names, rotation=45, ha="right")
    ax.set_ylabel("Volume (lbs)", fontsize=11)
    ax.set_title(f"{a.name} vs {b.name}", fontsize=14, fontweight="bold")
    ax.legend()
    ax.grid(True, alpha=0.3, axis="y")

    _finish(output_path, show)
