from datetime import timezone
from sqlalchemy.types import TypeDecorator, DateTime


class TZAwareDateTime(TypeDecorator):
    """
    DateTime column that always hands back timezone-aware values.

    Naive datetimes are treated as UTC on the way in and on the way out, so
    backends without native timezone support (sqlite) behave like postgres.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None

        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)

        return value

    def process_result_value(self, value, dialect):
        if value is None:
            return None

        return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)
