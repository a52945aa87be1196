"""
Resource API - Resource Route Handlers
========================================

What:  GET /resources, GET /resources/{resourceID}, POST /resources.
How:   Delegates to ResourceService. POST schedules the Discord notification
       as a background task, which runs after the insert has committed and
       the response has been sent.
"""

from typing import List

from fastapi import APIRouter, BackgroundTasks, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from resource_api.database import get_db_session
from resource_api.schemas.common import ErrorResponse
from resource_api.schemas.resource import ResourceCreate, ResourceRow
from resource_api.services.notification_service import ResourceNotifier, get_notifier
from resource_api.services.resource_service import resource_service

router = APIRouter(prefix="/resources", tags=["Resources"])


@router.get(
    "",
    response_model=List[ResourceRow],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List all resources, newest first",
)
async def list_resources(db: AsyncSession = Depends(get_db_session)) -> List[ResourceRow]:
    return await resource_service.list_resources(db)


@router.get(
    "/{resource_id}",
    response_model=ResourceRow,
    responses={
        404: {"description": "Resource not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a single resource",
)
async def get_resource(
    resource_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> ResourceRow:
    return await resource_service.get_resource(db, resource_id)


@router.post(
    "",
    response_class=PlainTextResponse,
    responses={
        200: {"description": "Resource stored", "content": {"text/plain": {}}},
        400: {"description": "Rejected by database constraints", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a resource",
    description=(
        "Stores a resource and announces it on the configured Discord webhook. "
        "The announcement happens after the response and never affects it."
    ),
)
async def create_resource(
    payload: ResourceCreate,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db_session),
    notifier: ResourceNotifier = Depends(get_notifier),
) -> PlainTextResponse:
    """
    Insert, commit, then announce.

    Ordering:
        1. create_resource commits (a failure here answers 400/500)
        2. the notification is queued as a background task
        3. the confirmation is returned; Starlette runs the task afterwards

    Why a background task:
        Discord latency or an outage must not delay or fail the response.
        The notifier retries and logs on its own.
    """
    resource = await resource_service.create_resource(db, payload)

    background_tasks.add_task(
        notifier.notify_resource_created,
        resource.resource_name,
        resource.resource_description,
    )
    return PlainTextResponse("Resource post request successful")
