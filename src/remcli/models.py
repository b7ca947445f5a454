from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, Any
from uuid import UUID, uuid4

def generate_id() -> UUID:
    """Return a fresh random task identifier."""
    return uuid4()

def utc_now() -> datetime:
    """Current instant as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)

def as_utc(value: datetime) -> datetime:
    """Normalise a datetime to UTC; naive values are taken to already be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)

class TaskStatus(Enum):
    TODO = "todo"
    DOING = "doing"
    DONE = "done"

    @property
    def label(self) -> str:
        return self.name

class TaskMetadata(BaseModel):
    """The metadata block stored at the top of every task file.

    Status is deliberately absent: it is derived from the directory the file
    lives in.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: UUID = Field(description="Unique identifier of the task")
    name: str = Field(description="Short label supplied by the user")
    created_at: datetime = Field(description="When the task was created (UTC)")
    updated_at: datetime = Field(description="When the task last changed status (UTC)")

    @field_validator('created_at', 'updated_at')
    @classmethod
    def normalise_timestamp(cls, v):
        return as_utc(v)

    def to_record(self) -> Dict[str, Any]:
        """Plain mapping in on-disk key order, timestamps as RFC 3339 strings."""
        return self.model_dump(mode='json')

class Task(BaseModel):
    """A single tracked task."""

    id: UUID = Field(default_factory=generate_id, description="Unique identifier of the task")
    name: str = Field(description="Short label supplied by the user")
    status: TaskStatus = Field(default=TaskStatus.TODO, description="Lifecycle state; selects the storage directory")
    created_at: datetime = Field(default_factory=utc_now, description="When the task was created (UTC)")
    updated_at: datetime = Field(default_factory=utc_now, description="When the task last changed status (UTC)")

    @field_validator('created_at', 'updated_at')
    @classmethod
    def normalise_timestamp(cls, v):
        return as_utc(v)

    @classmethod
    def new(cls, name: str) -> 'Task':
        """Create a TODO task whose created and updated instants coincide."""
        now = utc_now()
        return cls(id=generate_id(), name=name, status=TaskStatus.TODO, created_at=now, updated_at=now)

    @classmethod
    def from_metadata(cls, metadata: TaskMetadata, status: TaskStatus) -> 'Task':
        return cls(
            id=metadata.id,
            name=metadata.name,
            status=status,
            created_at=metadata.created_at,
            updated_at=metadata.updated_at,
        )

    def metadata(self) -> TaskMetadata:
        return TaskMetadata(
            id=self.id,
            name=self.name,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    @property
    def short_id(self) -> str:
        return str(self.id)[:8]
