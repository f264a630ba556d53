"""Split appointment lists into the upcoming and past sections."""

import logging
from datetime import datetime

from pydantic import BaseModel, Field

from telehealth.core.errors import MalformedTimeError
from telehealth.core.timeutils import interval_bounds
from telehealth.models.appointment import Appointment
from telehealth.services.appointment_status import AppointmentBucket, classify_appointment

logger = logging.getLogger(__name__)


class PartitionResult(BaseModel):
    upcoming: list[Appointment] = Field(default_factory=list)
    past: list[Appointment] = Field(default_factory=list)
    ongoing_ids: set[str] = Field(default_factory=set)
    unclassified: list[Appointment] = Field(default_factory=list)


def partition(appointments: list[Appointment], now: datetime, skip_malformed: bool = False) -> PartitionResult:
    """Group appointments by bucket, keeping input order within each group.

    Classification errors propagate unless ``skip_malformed`` is set, in which
    case the offending appointment is collected in ``unclassified``.
    """
    result = PartitionResult()

    for appointment in appointments:
        try:
            classification = classify_appointment(appointment, now)
        except MalformedTimeError:
            if not skip_malformed:
                raise
            logger.warning('Skipping appointment %s with malformed schedule data.', appointment.id, exc_info=True)
            result.unclassified.append(appointment)
            continue

        if classification.bucket == AppointmentBucket.PAST:
            result.past.append(appointment)
        else:
            result.upcoming.append(appointment)

        if classification.is_ongoing:
            result.ongoing_ids.add(appointment.id)

    return result


def sort_upcoming(appointments: list[Appointment]) -> list[Appointment]:
    """Soonest start first."""
    return sorted(
        appointments,
        key=lambda appointment: interval_bounds(appointment.date, appointment.start_time, appointment.end_time)[0],
    )


def sort_past(appointments: list[Appointment]) -> list[Appointment]:
    """Most recently ended first."""
    return sorted(
        appointments,
        key=lambda appointment: interval_bounds(appointment.date, appointment.start_time, appointment.end_time)[1],
        reverse=True,
    )
