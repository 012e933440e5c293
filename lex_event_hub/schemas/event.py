"""
Quality standard: One event shape for every path.
Reason: Live sources, the database and the API share the same model. Python
attributes are snake_case; the JSON contract is camelCase (startTime, isFree...).
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Optional


class EventCreate(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )

    title: str = Field(min_length=1)
    description: Optional[str] = None
    start_time: datetime
    location: Optional[str] = None
    image_url: Optional[str] = None
    source_url: Optional[str] = None
    category: str = Field(min_length=1)
    is_free: bool = False

    @field_validator("start_time")
    @classmethod
    def to_local_naive(cls, value: datetime) -> datetime:
        # The store and the filters work with naive local time
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value

    @field_validator("is_free", mode="before")
    @classmethod
    def null_is_false(cls, value):
        return False if value is None else value

    @property
    def dedup_key(self) -> str:
        """Title plus calendar date: same-titled events on the same day collapse."""
        return f"{self.title}|{self.start_time.date().isoformat()}"


class EventSchema(EventCreate):
    """Event as returned by the API. Live events carry a positional id."""
    id: Optional[int] = None


class LiveEventsResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    events: list[EventSchema]
    generated_at: datetime
    source_count: int
    total: int


class MessageResponse(BaseModel):
    message: str
    error: Optional[str] = None
