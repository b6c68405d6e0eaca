# Import every model module so the declarative metadata is complete.
from umission.db.base import AbstractSQLModel
from umission.api.users.models import Users, UserRoles
from umission.api.events.models import (
    EventCategories,
    EventFeedbacks,
    EventRegistrations,
    Events,
    EventStatus,
    RegistrationStatus,
)
