import os
import tempfile

import pytest_asyncio

_TEST_DB_DIR = tempfile.mkdtemp(prefix="fuelcontrol-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_DIR}/test.sqlite3"


@pytest_asyncio.fixture(autouse=True)
async def clean_db():
    from sqlalchemy import delete

    from app.database import async_session, create_tables
    from app.models import FuelLog, Station, Vehicle

    await create_tables()
    async with async_session() as session:
        for model in (Vehicle, Station, FuelLog):
            await session.execute(delete(model))
        await session.commit()
    yield
