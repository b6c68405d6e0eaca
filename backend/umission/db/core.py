import logging
import os
from typing import Annotated
from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

from umission.config import settings
from umission.core.validations.exceptions import StorageUnavailable
from umission.db.registry import *

logger = logging.getLogger(__name__)

engine = create_async_engine(settings.DATABASE_URL)

AsyncSessionLocal = async_sessionmaker(
    autocommit=False, autoflush=False, expire_on_commit=False, bind=engine
)


async def get_session():
    async with AsyncSessionLocal() as session:
        yield session


SessionDep = Annotated[AsyncSession, Depends(get_session)]


async def commit_or_rollback(session: AsyncSession) -> None:
    """Commit the unit of work, or undo all of it and report the storage failure."""
    try:
        await session.commit()
    except SQLAlchemyError as exc:
        await session.rollback()
        logger.error("Commit failed, rolled back: %s", exc)
        raise StorageUnavailable() from exc


# setup logging for sqlalchemy

logging.basicConfig()
sql_logger = logging.getLogger("sqlalchemy.engine")
sql_logger.setLevel(logging.INFO if settings.DEBUG else logging.WARNING)

if settings.SQL_LOG_FILE:
    os.makedirs(os.path.dirname(settings.SQL_LOG_FILE) or ".", exist_ok=True)

    file_handler = logging.FileHandler(settings.SQL_LOG_FILE)
    file_handler.setLevel(logging.INFO)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    file_handler.setFormatter(formatter)

    sql_logger.addHandler(file_handler)
