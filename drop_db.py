import asyncio
import os
import sys

from sqlalchemy import text

# Allow running from the repo root without installing
sys.path.append(os.getcwd())

from liftlog.db.base import Base
from liftlog.db.session import engine
from liftlog.models import *  # noqa: F401, F403 - register all models


async def drop_tables():
    print("Dropping all LiftLog tables...")
    async with engine.begin() as conn:
        await conn.execute(text("DROP TABLE IF EXISTS alembic_version"))
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()
    print("Tables dropped.")


if __name__ == "__main__":
    asyncio.run(drop_tables())
