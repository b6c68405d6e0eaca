import enum
from sqlalchemy import (
    JSON,
    Column,
    Enum,
    Integer,
    String,
)
from umission.db.mixins import TimestampsMixin
from umission.db.base import AbstractSQLModel


class UserRoles(enum.Enum):
    volunteer = "volunteer"
    organizer = "organizer"


class Users(AbstractSQLModel, TimestampsMixin):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    full_name = Column(String(100), nullable=False)
    email = Column(String(100), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=True)
    role = Column(Enum(UserRoles), nullable=False, default=UserRoles.volunteer)
    avatar = Column(String, nullable=True)
    bookmarks = Column(JSON, nullable=False, default=list)
