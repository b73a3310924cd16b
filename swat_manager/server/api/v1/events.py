"""
API endpoints for calendar events.

Events belong to the user who scheduled them. Listings can be windowed to a
day, a Sunday-to-Saturday week or a month, and filtered by type, priority and
status.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException, Query, Response, status

from swat_manager.core.database.base import utc_now
from swat_manager.core.database.entities.events import Event
from swat_manager.core.database.entities.users import User
from swat_manager.core.database.repositories import SqlRepoBundle
from swat_manager.core.logging_config import get_logger
from swat_manager.core.models.domain.enums import CalendarView
from swat_manager.core.models.io.events import EventCreate, EventRead, EventUpdate
from swat_manager.server.services.calendar import calendar_window, filter_events, parse_date, parse_event_start
from swat_manager.server.services.deps import CurrentUser, ReposDep, ensure_agency_access

logger = get_logger(__name__)

router = APIRouter(tags=["events"])


def _schedule_fields(data: Dict[str, Any], current: Optional[Event] = None) -> Dict[str, Any]:
    """Turn the ``date``/``time``/``end_date``/``end_time`` strings of a payload into stored columns."""
    fields: Dict[str, Any] = {}
    day = data.pop("date", None)
    time = data.pop("time", None)
    end_day = data.pop("end_date", None)
    end_time = data.pop("end_time", None)
    try:
        if day is not None or time is not None:
            start_day = day or current.start_date.strftime("%Y-%m-%d")
            start_time = time or (current.start_time if current and current.start_time else "00:00")
            fields["start_date"] = parse_event_start(start_day, start_time)
            fields["start_time"] = start_time
        if end_day is not None:
            fields["end_date"] = parse_event_start(end_day, end_time or "00:00")
        if end_time is not None:
            fields["end_time"] = end_time
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Invalid date or time: {e}")
    return fields


async def _get_owned_event(repos: SqlRepoBundle, user: User, event_id: str, action: str) -> Event:
    event = await repos.events.get_by_id(event_id)
    if not event:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    if event.user_id != user.id:
        logger.info(f"User {user.id} tried to {action} event {event.id} owned by {event.user_id}")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=f"Not authorized to {action} this event")
    return event


@router.post(
    "",
    response_model=EventRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Event",
    description="Schedule an event owned by the current user.",
    responses={
        201: {"description": "Event created"},
        400: {"description": "Invalid date or time"},
        403: {"description": "Access denied to this agency"},
    },
)
async def create_event(payload: EventCreate, repos: ReposDep, user: CurrentUser) -> EventRead:
    """
    Create an event.

    - **date**: Start date, `YYYY-MM-DD`.
    - **time**: Start time, `HH:MM` (defaults to `00:00`).
    - **end_date** / **end_time**: Optional end.
    - **event_type**: training, maintenance, certification, meeting, deployment or other.
    - **agency_id**: Defaults to the user's agency; only admins may name another one.
    """
    if payload.agency_id:
        ensure_agency_access(user, payload.agency_id)
    data = payload.model_dump()
    schedule = _schedule_fields(data)
    data["agency_id"] = data.get("agency_id") or user.agency_id
    event = await repos.events.create(Event(**data, **schedule, user_id=user.id))
    logger.info(f"User {user.id} created event {event.id} on {event.start_date.date()}")
    return EventRead.model_validate(event)


@router.get(
    "",
    response_model=list[EventRead],
    summary="List Events",
    description="List the current user's events, optionally windowed and filtered.",
    responses={400: {"description": "Invalid anchor date"}},
)
async def list_events(
    repos: ReposDep,
    user: CurrentUser,
    view: Optional[CalendarView] = Query(default=None, description="day, week or month"),
    anchor: Optional[str] = Query(default=None, alias="date", description="Anchor date, YYYY-MM-DD; defaults to today"),
    event_type: List[str] = Query(default=[]),
    priority: List[str] = Query(default=[]),
    event_status: List[str] = Query(default=[], alias="status"),
) -> list[EventRead]:
    """
    List events.

    Without **view** every event of the user is returned. With it, only
    events starting inside the day, week (Sunday first) or month containing
    **date**. **event_type**, **priority** and **status** may be repeated;
    an empty filter matches everything.
    """
    if view is not None:
        try:
            anchor_day = parse_date(anchor) if anchor else date.today()
        except ValueError:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid date, expected YYYY-MM-DD")
        start, end = calendar_window(view, anchor_day)
        events = await repos.events.list_by_user_in_range(user.id, start, end)
    else:
        events = await repos.events.list_by_user(user.id)
    events = filter_events(events, event_type, priority, event_status)
    logger.debug(f"Retrieved {len(events)} events for user {user.id} (view={view})")
    return [EventRead.model_validate(e) for e in events]


@router.put(
    "/{event_id}",
    response_model=EventRead,
    summary="Update Event",
    description="Update an event. Only its owner may change it.",
    responses={
        400: {"description": "Invalid date or time"},
        403: {"description": "Not authorized to update this event"},
        404: {"description": "Event not found"},
    },
)
async def update_event(event_id: str, payload: EventUpdate, repos: ReposDep, user: CurrentUser) -> EventRead:
    event = await _get_owned_event(repos, user, event_id, "update")
    data = payload.model_dump(exclude_unset=True)
    data.update(_schedule_fields(data, current=event))
    repos.events.apply_changes(event, data)
    event.updated_at = utc_now()
    event = await repos.events.update(event)
    return EventRead.model_validate(event)


@router.delete(
    "/{event_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Event",
    description="Delete an event. Only its owner may delete it.",
    responses={403: {"description": "Not authorized to delete this event"}, 404: {"description": "Event not found"}},
)
async def delete_event(event_id: str, repos: ReposDep, user: CurrentUser) -> Response:
    event = await _get_owned_event(repos, user, event_id, "delete")
    await repos.events.delete(event.id)
    logger.info(f"User {user.id} deleted event {event.id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
