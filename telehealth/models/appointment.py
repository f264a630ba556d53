"""Appointment model definitions."""

from datetime import date, time

from pydantic import BaseModel, Field, field_validator

from telehealth.models.session import (
    ConsultationType,
    normalize_consultation_type,
    reduce_to_calendar_date,
)


class Appointment(BaseModel):
    """A confirmed booking copied from a paid time slot."""
    id: str = Field(..., alias="_id")
    date: date | str
    start_time: time | str = Field(..., alias="startTime")
    end_time: time | str = Field(..., alias="endTime")
    status: str = "confirmed"
    type: ConsultationType = ConsultationType.IN_PERSON
    hospital_name: str | None = Field(default=None, alias="hospitalName")
    doctor_name: str | None = Field(default=None, alias="doctorName")

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

    @property
    def is_video(self) -> bool:
        return self.type == ConsultationType.VIDEO
