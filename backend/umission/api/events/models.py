import enum
from datetime import datetime, timezone
from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    Enum,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from umission.db.base import AbstractSQLModel
from umission.db.mixins import TimestampsMixin
from umission.core.utils.db_fields import TZAwareDateTime


class EventCategories(enum.Enum):
    campus_life = "Campus Life"
    education = "Education"
    environment = "Environment"
    welfare = "Welfare"


class EventStatus(enum.Enum):
    upcoming = "upcoming"
    completed = "completed"


class RegistrationStatus(enum.Enum):
    pending = "pending"
    confirmed = "confirmed"
    rejected = "rejected"


class Events(AbstractSQLModel, TimestampsMixin):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(150), nullable=False)
    date = Column(Date, nullable=False)
    location = Column(String(255), nullable=False)
    category = Column(
        Enum(EventCategories, values_callable=lambda e: [c.value for c in e]),
        nullable=False,
    )
    max_volunteers = Column(Integer, nullable=False)
    description = Column(Text, nullable=False, default="")
    tasks = Column(Text, nullable=False, default="")
    image_url = Column(String, nullable=True)

    organizer_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    organizer_name = Column(String(100), nullable=False)

    # Written only by the registration ledger.
    current_volunteers = Column(Integer, nullable=False, default=0)
    status = Column(Enum(EventStatus), nullable=False, default=EventStatus.upcoming)

    organizer = relationship("Users")
    registrations = relationship("EventRegistrations", back_populates="event")
    feedbacks = relationship("EventFeedbacks", back_populates="event")

    __table_args__ = (
        CheckConstraint("max_volunteers > 0", name="ck_events_max_volunteers"),
        CheckConstraint("current_volunteers >= 0", name="ck_events_current_volunteers"),
    )


class EventRegistrations(AbstractSQLModel, TimestampsMixin):
    __tablename__ = "event_registrations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Snapshots taken at join time, never refreshed.
    user_name = Column(String(100), nullable=False)
    user_avatar = Column(String, nullable=True)
    event_title = Column(String(150), nullable=False)
    event_date = Column(Date, nullable=False)
    event_status = Column(Enum(EventStatus), nullable=False)

    requested_at = Column(
        TZAwareDateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    status = Column(
        Enum(RegistrationStatus),
        nullable=False,
        default=RegistrationStatus.pending,
        index=True,
    )

    event = relationship("Events", back_populates="registrations")
    user = relationship("Users")

    __table_args__ = (UniqueConstraint("event_id", "user_id"),)


class EventFeedbacks(AbstractSQLModel, TimestampsMixin):
    __tablename__ = "event_feedbacks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=False, default="")

    event = relationship("Events", back_populates="feedbacks")
    user = relationship("Users")

    __table_args__ = (
        UniqueConstraint("event_id", "user_id"),
        CheckConstraint("rating BETWEEN 1 AND 5", name="ck_event_feedbacks_rating"),
    )
