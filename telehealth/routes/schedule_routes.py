import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel

from telehealth.core import config
from telehealth.core.clock import FixedClock, SystemClock
from telehealth.core.errors import MalformedTimeError
from telehealth.models.appointment import Appointment
from telehealth.models.session import Session
from telehealth.services.appointment_status import AppointmentClassification, classify_appointment
from telehealth.services.partitioner import partition, sort_past, sort_upcoming
from telehealth.services.slot_classifier import (
    SlotSummary,
    can_cancel_session,
    classify_session,
    describe_availability,
    is_session_past,
    session_time_range,
    split_sessions,
)

router = APIRouter(tags=['schedule'])

logger = logging.getLogger(__name__)

STATUS_UNAVAILABLE_LABEL = 'Status unavailable'


class SessionSummaryResponse(BaseModel):
    session_id: str
    summary: SlotSummary | None = None
    time_range: str | None = None
    availability_text: str | None = None
    is_past: bool | None = None
    can_cancel: bool | None = None
    error: str | None = None


class SessionSplitResponse(BaseModel):
    upcoming: list[str]
    past: list[str]
    unclassified_ids: list[str]


class AppointmentPartitionResponse(BaseModel):
    upcoming: list[Appointment]
    past: list[Appointment]
    ongoing_ids: list[str]
    unclassified_ids: list[str]


def get_clock():
    fixed_now = config.get_fixed_now()
    if fixed_now is not None:
        return FixedClock(fixed_now)
    return SystemClock()


def summarize_session(session: Session, now) -> SessionSummaryResponse:
    try:
        summary = classify_session(session, now)
        is_past = is_session_past(session, now)
        return SessionSummaryResponse(
            session_id=session.id,
            summary=summary,
            time_range=session_time_range(session),
            availability_text=describe_availability(summary, is_past=is_past),
            is_past=is_past,
            can_cancel=can_cancel_session(session, now),
        )
    except MalformedTimeError as exc:
        logger.warning('Could not classify session %s: %s', session.id, exc)
        return SessionSummaryResponse(
            session_id=session.id,
            error=f'{STATUS_UNAVAILABLE_LABEL}: {exc}',
        )


@router.post('/sessions/summary', response_model=list[SessionSummaryResponse])
def summarize_sessions(sessions: list[Session], clock=Depends(get_clock)):
    now = clock.now()
    return [summarize_session(session, now) for session in sessions]


@router.post('/sessions/split', response_model=SessionSplitResponse)
def split_session_list(sessions: list[Session], clock=Depends(get_clock)):
    now = clock.now()

    classifiable: list[Session] = []
    unclassified_ids: list[str] = []
    for session in sessions:
        try:
            is_session_past(session, now)
        except MalformedTimeError as exc:
            logger.warning('Could not split session %s: %s', session.id, exc)
            unclassified_ids.append(session.id)
            continue
        classifiable.append(session)

    split = split_sessions(classifiable, now)
    return SessionSplitResponse(
        upcoming=[session.id for session in split.upcoming],
        past=[session.id for session in split.past],
        unclassified_ids=unclassified_ids,
    )


@router.post('/appointments/status', response_model=AppointmentClassification)
def get_appointment_status(appointment: Appointment, clock=Depends(get_clock)):
    try:
        return classify_appointment(appointment, clock.now())
    except MalformedTimeError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        ) from exc


@router.post('/appointments/partition', response_model=AppointmentPartitionResponse)
def partition_appointments(
    appointments: list[Appointment],
    sort: bool = Query(default=True),
    clock=Depends(get_clock),
):
    result = partition(appointments, clock.now(), skip_malformed=True)

    upcoming = result.upcoming
    past = result.past
    if sort:
        upcoming = sort_upcoming(upcoming)
        past = sort_past(past)

    return AppointmentPartitionResponse(
        upcoming=upcoming,
        past=past,
        ongoing_ids=sorted(result.ongoing_ids),
        unclassified_ids=[appointment.id for appointment in result.unclassified],
    )
