from datetime import UTC, datetime

from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    return datetime.now(UTC)


# Base Database Model
class BaseModel(SQLModel):
    """
    Abstract base model that adds common fields to all tables.
    Using an abstract class ensures consistency across our schema.
    """
    # always use UTC in production to avoid timezone headaches
    created_at: datetime = Field(default_factory=utcnow, index=True)


class TimestampedModel(BaseModel):
    """Base for mutable rows: tracks the last write as well."""
    updated_at: datetime = Field(default_factory=utcnow)
