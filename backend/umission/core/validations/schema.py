from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from umission.response import CustomHTTPException
from umission.core.validations.exceptions import NotFound


async def validate_relations(session: AsyncSession, validation: dict[str, tuple]):
    """Raise NotFound naming every referenced row that does not exist."""
    errors = {}
    for key, (schema, value) in validation.items():
        if value is None:
            continue
        if not await session.scalar(select(exists().where(schema.id == value))):
            errors[key] = f"{key} not found"
    if errors:
        raise NotFound(
            message=f"{', '.join(errors.keys()).capitalize()} not found", errors=errors
        )
    return True


async def validate_unique(session: AsyncSession, **kwargs):
    unique = kwargs.get("unique", {})
    errors = {}
    for key, (schema, value) in unique.items():
        if not value:
            continue
        query = select(exists().where(getattr(schema, key) == value))
        if await session.scalar(query):
            errors[key] = f"{key} already exists"
    if errors:
        raise CustomHTTPException(
            status_code=400, message="Invalid Request", errors=errors
        )
    return True
