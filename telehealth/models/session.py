"""Session and time slot models."""

from datetime import date, datetime, time
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class SlotStatus(str, Enum):
    """Persisted statuses a time slot can carry."""
    AVAILABLE = "available"
    BOOKED = "booked"
    UNAVAILABLE = "unavailable"


class ConsultationType(str, Enum):
    """How a session or appointment is held."""
    IN_PERSON = "in-person"
    VIDEO = "video"


def reduce_to_calendar_date(value: object) -> object:
    if isinstance(value, datetime):
        return value.date()
    return value


def normalize_consultation_type(value: object) -> object:
    if isinstance(value, str):
        normalized = value.strip().lower()
        # Older records call video consultations "online".
        if normalized == "online":
            return ConsultationType.VIDEO.value
        return normalized
    return value


class TimeSlot(BaseModel):
    """One bookable interval within a session."""
    start_time: time | str = Field(..., alias="startTime")
    end_time: time | str = Field(..., alias="endTime")
    status: str = SlotStatus.AVAILABLE.value
    patient_id: str | None = Field(default=None, alias="patientId")

    class Config:
        populate_by_name = True
        frozen = True

    @field_validator("status")
    @classmethod
    def normalize_status(cls, value: str) -> str:
        return value.strip().lower()


class Session(BaseModel):
    """A doctor's published block of time on one calendar date."""
    id: str = Field(..., alias="_id")
    date: date | str
    type: ConsultationType = ConsultationType.IN_PERSON
    hospital_name: str | None = Field(default=None, alias="hospitalName")
    time_slots: list[TimeSlot] = Field(default_factory=list, alias="timeSlots")

    class Config:
        populate_by_name = True
        frozen = True

    @field_validator("date", mode="before")
    @classmethod
    def reduce_date(cls, value: object) -> object:
        return reduce_to_calendar_date(value)

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, value: object) -> object:
        return normalize_consultation_type(value)
