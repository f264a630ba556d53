"""Booking eligibility of a session's time slots at a given instant.

The classification is a derived view. A slot whose start time has elapsed today
is reported as time-passed while its stored status stays ``available``.
"""

import warnings
from datetime import datetime
from enum import Enum

from pydantic import BaseModel

from telehealth.core.errors import EmptySessionWarning
from telehealth.core.timeutils import (
    combine_date_time,
    is_same_calendar_day,
    parse_calendar_date,
    parse_time_of_day,
    roll_past_midnight,
)
from telehealth.models.session import Session, SlotStatus

NO_TIME_RANGE_LABEL = 'Time not specified'


class BookingRecommendation(str, Enum):
    BOOK_APPOINTMENT = 'Book Appointment'
    FULLY_BOOKED = 'Fully Booked'
    TIME_PASSED = 'Time Passed'
    NO_AVAILABLE_SLOTS = 'No Available Slots'
    NO_SLOTS = 'No Slots Available'


class SlotSummary(BaseModel):
    total: int
    available: int
    booked: int
    time_passed: int
    is_fully_booked: bool
    is_all_time_passed: bool
    has_available_slots: bool
    recommendation: BookingRecommendation


class SessionSplit(BaseModel):
    upcoming: list[Session]
    past: list[Session]


def empty_summary() -> SlotSummary:
    return SlotSummary(
        total=0,
        available=0,
        booked=0,
        time_passed=0,
        is_fully_booked=False,
        is_all_time_passed=False,
        has_available_slots=False,
        recommendation=BookingRecommendation.NO_SLOTS,
    )


def choose_recommendation(has_available_slots: bool, is_fully_booked: bool, is_all_time_passed: bool) -> BookingRecommendation:
    if has_available_slots:
        return BookingRecommendation.BOOK_APPOINTMENT
    if is_fully_booked:
        return BookingRecommendation.FULLY_BOOKED
    if is_all_time_passed:
        return BookingRecommendation.TIME_PASSED
    return BookingRecommendation.NO_AVAILABLE_SLOTS


def classify_session(session: Session, now: datetime) -> SlotSummary:
    if not session.time_slots:
        warnings.warn(EmptySessionWarning(f'Session {session.id} has no time slots.'), stacklevel=2)
        return empty_summary()

    session_date = parse_calendar_date(session.date)
    is_today = is_same_calendar_day(session_date, now)

    available = 0
    booked = 0
    time_passed = 0

    for slot in session.time_slots:
        if slot.status == SlotStatus.BOOKED:
            booked += 1
        elif slot.status == SlotStatus.AVAILABLE:
            if is_today and now > combine_date_time(session_date, slot.start_time, field='start_time'):
                time_passed += 1
            else:
                available += 1
        else:
            time_passed += 1

    total = len(session.time_slots)
    is_fully_booked = booked == total
    is_all_time_passed = time_passed == total and booked == 0
    has_available_slots = available > 0

    return SlotSummary(
        total=total,
        available=available,
        booked=booked,
        time_passed=time_passed,
        is_fully_booked=is_fully_booked,
        is_all_time_passed=is_all_time_passed,
        has_available_slots=has_available_slots,
        recommendation=choose_recommendation(has_available_slots, is_fully_booked, is_all_time_passed),
    )


def describe_availability(summary: SlotSummary, is_past: bool = False) -> str:
    """Build the one-line slot breakdown shown under a session listing."""
    if is_past:
        text = f'{summary.total} total slots'
        if summary.booked > 0:
            text += f', {summary.booked} were booked'
        if summary.available > 0:
            text += f', {summary.available} were available'
        return text

    text = f'{summary.available}/{summary.total} slots available'
    if summary.booked > 0:
        text += f', {summary.booked} booked'
    if summary.time_passed > 0:
        text += f', {summary.time_passed} time passed'
    return text


def session_time_range(session: Session) -> str:
    if not session.time_slots:
        return NO_TIME_RANGE_LABEL

    first_start = parse_time_of_day(session.time_slots[0].start_time, 'start_time')
    last_end = parse_time_of_day(session.time_slots[-1].end_time, 'end_time')
    return f'{first_start:%H:%M} - {last_end:%H:%M}'


def session_end(session: Session) -> datetime | None:
    if not session.time_slots:
        return None

    first_start = parse_time_of_day(session.time_slots[0].start_time, 'start_time')
    last_end = parse_time_of_day(session.time_slots[-1].end_time, 'end_time')
    end_instant = combine_date_time(session.date, last_end, field='end_time')
    return roll_past_midnight(end_instant, first_start, last_end)


def is_session_past(session: Session, now: datetime) -> bool:
    end_instant = session_end(session)
    if end_instant is None:
        return False
    return end_instant < now


def can_cancel_session(session: Session, now: datetime) -> bool:
    if is_session_past(session, now):
        return False
    return not any(slot.status == SlotStatus.BOOKED for slot in session.time_slots)


def split_sessions(sessions: list[Session], now: datetime) -> SessionSplit:
    upcoming: list[Session] = []
    past: list[Session] = []

    for session in sessions:
        end_instant = session_end(session)
        if end_instant is not None and end_instant >= now:
            upcoming.append(session)
        else:
            past.append(session)

    return SessionSplit(upcoming=upcoming, past=past)
