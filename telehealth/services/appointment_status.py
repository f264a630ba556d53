"""Lifecycle bucket of an appointment at a given instant."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel

from telehealth.core.timeutils import interval_bounds
from telehealth.models.appointment import Appointment
from telehealth.models.session import Session, SlotStatus, TimeSlot


class AppointmentBucket(str, Enum):
    UPCOMING = 'upcoming'
    PAST = 'past'


class AppointmentClassification(BaseModel):
    bucket: AppointmentBucket
    is_ongoing: bool


class SlotOccupancy(BaseModel):
    is_ongoing: bool
    is_past: bool


def classify_interval(start: datetime, end: datetime, now: datetime) -> AppointmentClassification:
    # Both ends are inclusive so there is no instant that is neither upcoming nor past.
    is_ongoing = start <= now <= end
    bucket = AppointmentBucket.PAST if now > end else AppointmentBucket.UPCOMING
    return AppointmentClassification(bucket=bucket, is_ongoing=is_ongoing)


def classify_appointment(appointment: Appointment, now: datetime) -> AppointmentClassification:
    start, end = interval_bounds(appointment.date, appointment.start_time, appointment.end_time)
    return classify_interval(start, end, now)


def classify_booked_slot(session: Session, slot: TimeSlot, now: datetime) -> SlotOccupancy:
    """Occupancy of one slot in the doctor's per-session appointment view.

    Only a booked slot can be ongoing. Past-ness applies to every slot so that
    open slots whose window has closed are greyed out as well.
    """
    start, end = interval_bounds(session.date, slot.start_time, slot.end_time)
    classification = classify_interval(start, end, now)
    return SlotOccupancy(
        is_ongoing=slot.status == SlotStatus.BOOKED and classification.is_ongoing,
        is_past=classification.bucket == AppointmentBucket.PAST,
    )
