"""
Strength workout tracking package.

This package provides the workout data model, JSON file storage for
named workouts, and volume analytics (breakdowns, rankings,
push/pull/legs splits and workout comparisons).
"""

__version__ = "0.1.0"
