#!/usr/bin/env python
"""
Workout tracking CLI runner.

Usage:
    python run.py list                                   # list saved workouts
    python run.py add "Push Day" "Bench,4,8,135,Push"    # log exercises
    python run.py show "Push Day"                        # exercises and totals
    python run.py edit "Push Day" 1 --weight 140         # edit an exercise
    python run.py analyze "Push Day"                     # rankings and split
    python run.py compare "Push Day" "Leg Day"           # compare two workouts
    python run.py delete "Push Day"                      # delete a workout
    python run.py visualize "Push Day" --no-show         # generate charts
"""

import sys
from pathlib import Path

# add package root to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from liftlog.main import main

if __name__ == "__main__":
    main()
