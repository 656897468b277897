"""Seed a sample 3-day push/pull/legs routine when no routines exist.

Usage: python scripts/seed_routines.py
"""

import asyncio
import os
import sys

# Add parent directory to path so we can import liftlog modules
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from sqlalchemy import func, select

from liftlog.db.session import async_session_maker
from liftlog.models import Routine
from liftlog.schemas.routine import ExerciseTemplateCreate, RoutineCreate, RoutineDayCreate
from liftlog.services.workout_service import WorkoutService


def _day(name: str, sort_order: int, exercises: list[tuple[str, str]]) -> RoutineDayCreate:
    return RoutineDayCreate(
        name=name,
        sort_order=sort_order,
        exercises=[
            ExerciseTemplateCreate(name=ex, target_config=reps, sort_order=i)
            for i, (ex, reps) in enumerate(exercises, start=1)
        ],
    )


SAMPLE_ROUTINE = RoutineCreate(
    name="Push / Pull / Legs",
    description="3-day split: push, pull, legs",
    days=[
        _day(
            "Chest / Shoulders / Triceps",
            1,
            [
                ("Flat Bench Press", "15-15-12-10"),
                ("Incline Bench Press", "15-15-12-10"),
                ("Dumbbell Flyes", "10-10-10-10"),
                ("Arnold Press", "12-12-10-10"),
                ("Lateral Raise", "12-12-12-12"),
                ("Triceps Pushdown", "12-12-12-12"),
                ("Overhead Triceps Extension", "12-12-12-12"),
            ],
        ),
        _day(
            "Back / Biceps",
            2,
            [
                ("Lat Pulldown", "15-15-12-10"),
                ("Seated Cable Row", "15-15-12-10"),
                ("One-Arm Dumbbell Row", "10-10-10-10"),
                ("Pullover", "10-10-10-10"),
                ("Barbell Curl", "15-15-12-12"),
                ("Alternating Dumbbell Curl", "15-15-12-12"),
            ],
        ),
        _day(
            "Legs",
            3,
            [
                ("Leg Press", "15-12-10-10"),
                ("Hack Squat", "15-12-10-10"),
                ("Leg Extension", "15-12-10-10"),
                ("Lying Leg Curl", "15-12-10-10"),
                ("Standing Calf Raise", "20-20-15-15"),
            ],
        ),
    ],
)


async def seed():
    async with async_session_maker() as db:
        existing = await db.scalar(select(func.count()).select_from(Routine))
        if existing:
            print(f"{existing} routine(s) already present, nothing to seed.")
            return

        routine = await WorkoutService(db).create_routine(SAMPLE_ROUTINE)
        print(f"Created routine '{routine.name}' (id={routine.id}) with {len(routine.days)} days.")
        for day in routine.days:
            print(f"  Day {day.id}: {day.name} ({len(day.exercises)} exercises)")


if __name__ == "__main__":
    asyncio.run(seed())
