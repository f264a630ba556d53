from datetime import datetime

import pytest

from telehealth.core.errors import MalformedTimeError
from telehealth.models.appointment import Appointment
from telehealth.models.session import Session, TimeSlot
from telehealth.services.appointment_status import (
    AppointmentBucket,
    classify_appointment,
    classify_booked_slot,
)


def make_appointment(start: str = '14:00', end: str = '14:30', appointment_date: str = '2026-01-05') -> Appointment:
    return Appointment(id='appointment-1', date=appointment_date, start_time=start, end_time=end)


@pytest.mark.parametrize(
    ('now', 'bucket', 'is_ongoing'),
    [
        (datetime(2026, 1, 5, 13, 59, 59), AppointmentBucket.UPCOMING, False),
        (datetime(2026, 1, 5, 14, 0, 0), AppointmentBucket.UPCOMING, True),
        (datetime(2026, 1, 5, 14, 15), AppointmentBucket.UPCOMING, True),
        (datetime(2026, 1, 5, 14, 30, 0), AppointmentBucket.UPCOMING, True),
        (datetime(2026, 1, 5, 14, 30, 1), AppointmentBucket.PAST, False),
        (datetime(2026, 1, 4, 14, 15), AppointmentBucket.UPCOMING, False),
        (datetime(2026, 1, 6, 14, 15), AppointmentBucket.PAST, False),
    ],
)
def test_classify_appointment_buckets(now: datetime, bucket: AppointmentBucket, is_ongoing: bool) -> None:
    classification = classify_appointment(make_appointment(), now)

    assert classification.bucket == bucket
    assert classification.is_ongoing is is_ongoing


def test_classify_appointment_is_ongoing_at_exact_start() -> None:
    classification = classify_appointment(make_appointment(), datetime(2026, 1, 5, 14, 0, 0))

    assert classification.is_ongoing
    assert classification.bucket == 'upcoming'


def test_classify_appointment_uses_date_part_of_iso_timestamp() -> None:
    appointment = make_appointment(appointment_date='2026-01-05T00:00:00.000Z')

    classification = classify_appointment(appointment, datetime(2026, 1, 5, 14, 10))

    assert classification.is_ongoing


@pytest.mark.parametrize(
    ('start', 'end', 'appointment_date'),
    [('2pm', '14:30', '2026-01-05'), ('14:00', '', '2026-01-05'), ('14:00', '14:30', 'someday')],
)
def test_classify_appointment_propagates_malformed_input(start: str, end: str, appointment_date: str) -> None:
    with pytest.raises(MalformedTimeError):
        classify_appointment(make_appointment(start, end, appointment_date), datetime(2026, 1, 5, 14, 0))


def test_classify_booked_slot_matches_appointment_boundaries() -> None:
    session = Session(id='session-1', date='2026-01-05', time_slots=[])
    booked_slot = TimeSlot(start_time='14:00', end_time='14:30', status='booked')
    appointment = make_appointment()

    for now in (datetime(2026, 1, 5, 14, 0), datetime(2026, 1, 5, 14, 30), datetime(2026, 1, 5, 14, 30, 1)):
        occupancy = classify_booked_slot(session, booked_slot, now)
        classification = classify_appointment(appointment, now)

        assert occupancy.is_ongoing == classification.is_ongoing
        assert occupancy.is_past == (classification.bucket == AppointmentBucket.PAST)


def test_classify_booked_slot_open_slot_is_never_ongoing() -> None:
    session = Session(id='session-1', date='2026-01-05', time_slots=[])
    open_slot = TimeSlot(start_time='14:00', end_time='14:30', status='available')

    occupancy = classify_booked_slot(session, open_slot, datetime(2026, 1, 5, 14, 15))

    assert not occupancy.is_ongoing
    assert not occupancy.is_past
