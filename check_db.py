import asyncio
import os
import sys

from sqlalchemy import text

# Allow running from the repo root without installing
sys.path.append(os.getcwd())

from liftlog.db.session import async_session_maker

TABLES = ["routines", "routine_days", "exercise_templates", "workout_sessions", "set_logs"]


async def check_data():
    async with async_session_maker() as session:
        print(f"Checking tables: {TABLES}")
        for table in TABLES:
            result = await session.execute(text(f"SELECT count(*) FROM {table}"))
            count = result.scalar()
            print(f"Table '{table}' row count: {count}")

        active = await session.execute(
            text("SELECT id, start_time FROM workout_sessions WHERE end_time IS NULL")
        )
        rows = active.all()
        if len(rows) > 1:
            print(f"WARNING: {len(rows)} active sessions: {[r.id for r in rows]}")
        elif rows:
            print(f"Active session: {rows[0].id} (started {rows[0].start_time})")
        else:
            print("No active session")


if __name__ == "__main__":
    asyncio.run(check_data())
