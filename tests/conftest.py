"""Shared fixtures: in-memory SQLite per test, service objects and an API client."""

import os

# Must be set before liftlog modules build the global engine
os.environ["DATABASE_URL_OVERRIDE"] = "sqlite+aiosqlite://"
os.environ.setdefault("TIMEZONE", "UTC")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import liftlog.models  # noqa: F401 - register all models
from liftlog.db.base import Base
from liftlog.db.session import enable_sqlite_foreign_keys, get_db
from liftlog.main import app
from liftlog.schemas.routine import ExerciseTemplateCreate, RoutineCreate, RoutineDayCreate
from liftlog.services.workout_service import WorkoutService


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def service(db):
    return WorkoutService(db)


@pytest.fixture
async def routine(service):
    """Two-day routine: Push (2 exercises) and Pull (1 exercise)."""
    return await service.create_routine(
        RoutineCreate(
            name="PPL",
            description="test routine",
            days=[
                RoutineDayCreate(
                    name="Push",
                    sort_order=1,
                    exercises=[
                        ExerciseTemplateCreate(name="Bench Press", target_config="15-12-10-8", sort_order=1),
                        ExerciseTemplateCreate(name="Overhead Press", target_config="12-12-10", sort_order=2),
                    ],
                ),
                RoutineDayCreate(
                    name="Pull",
                    sort_order=2,
                    exercises=[ExerciseTemplateCreate(name="Barbell Row", target_config="10-10-10")],
                ),
            ],
        )
    )


@pytest.fixture
def push_day(routine):
    return routine.days[0]


@pytest.fixture
def pull_day(routine):
    return routine.days[1]


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
