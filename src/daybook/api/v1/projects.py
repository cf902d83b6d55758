"""Project, entry and progress endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, HTTPException, Path, Query, Request, status

from src.daybook.api.dependencies import (
    Actor,
    EntryServiceDep,
    OptionalActor,
    ProfileServiceDep,
    ProjectServiceDep,
)
from src.daybook.core.config import get_settings
from src.daybook.core.exceptions import NotFound
from src.daybook.core.rate_limit import limiter
from src.daybook.models.base import utc_today
from src.daybook.schemas import (
    EntryRead,
    EntryWrite,
    ProgressRead,
    ProjectCreate,
    ProjectRead,
    PublicProjectRead,
)
from src.daybook.services.progress import day_for_date, progress

router = APIRouter(prefix="/projects", tags=["projects"])

DayNumber = Annotated[int, Path(description="Day number within the project, starting at 1")]


def _too_large(limit: int) -> HTTPException:
    return HTTPException(status_code=413, detail=f"Image exceeds {limit} bytes")


async def _read_image_body(request: Request, limit: int) -> bytes:
    """Read the upload, stopping as soon as it grows past ``limit`` bytes."""
    declared = request.headers.get("content-length")
    if declared is not None and declared.isdigit() and int(declared) > limit:
        raise _too_large(limit)

    data = bytearray()
    async for chunk in request.stream():
        data.extend(chunk)
        if len(data) > limit:
            raise _too_large(limit)
    return bytes(data)


@router.post(
    "",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    responses={
        201: {"description": "Project created"},
        401: {"description": "Not authenticated"},
        422: {"description": "Blank title or unsupported duration"},
    },
)
async def create_project(
    request: ProjectCreate,
    actor: Actor,
    projects: ProjectServiceDep,
) -> ProjectRead:
    """Create a new project owned by the caller."""
    project = await projects.create_project(
        actor,
        title=request.title,
        description=request.description,
        duration_days=request.duration_days,
        is_public=request.is_public,
        start_date=request.start_date,
    )
    return ProjectRead.model_validate(project)


@router.get(
    "",
    response_model=list[ProjectRead],
    summary="List my projects",
    description="List the caller's projects, newest first.",
)
async def list_owned_projects(
    actor: Actor,
    projects: ProjectServiceDep,
    limit: Annotated[int | None, Query(ge=1, le=500)] = None,
) -> list[ProjectRead]:
    owned = await projects.list_owned(actor, limit)
    return [ProjectRead.model_validate(p) for p in owned]


@router.get(
    "/public",
    response_model=list[PublicProjectRead],
    summary="List public projects",
    description="List every public project, newest first, with its owner's display name.",
)
async def list_public_projects(
    projects: ProjectServiceDep,
    profiles: ProfileServiceDep,
    limit: Annotated[int | None, Query(ge=1, le=500)] = None,
) -> list[PublicProjectRead]:
    public = await projects.list_public(limit)
    names = await profiles.display_names(p.owner_id for p in public)
    return [
        PublicProjectRead(
            **ProjectRead.model_validate(p).model_dump(),
            owner_name=names[p.owner_id],
        )
        for p in public
    ]


@router.get(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Get project",
    responses={404: {"description": "Project not found or private"}},
)
async def get_project(
    project_id: UUID,
    actor: OptionalActor,
    projects: ProjectServiceDep,
) -> ProjectRead:
    project = await projects.get_project(project_id, actor)
    return ProjectRead.model_validate(project)


@router.get(
    "/{project_id}/progress",
    response_model=ProgressRead,
    summary="Get project progress",
)
async def get_progress(
    project_id: UUID,
    actor: OptionalActor,
    projects: ProjectServiceDep,
    entries: EntryServiceDep,
) -> ProgressRead:
    project = await projects.get_project(project_id, actor)
    done = progress(project, await entries.list_entries(project))
    return ProgressRead(
        completed=done.completed,
        total=done.total,
        percent=done.percent,
        current_day=day_for_date(project, utc_today()),
    )


@router.get(
    "/{project_id}/entries",
    response_model=list[EntryRead],
    summary="List entries",
    description="List the project's entries ordered by day number.",
)
async def list_entries(
    project_id: UUID,
    actor: OptionalActor,
    projects: ProjectServiceDep,
    entries: EntryServiceDep,
) -> list[EntryRead]:
    project = await projects.get_project(project_id, actor)
    return [EntryRead.model_validate(e) for e in await entries.list_entries(project)]


@router.get(
    "/{project_id}/entries/{day}",
    response_model=EntryRead,
    summary="Get the entry for a day",
    responses={404: {"description": "Project not found or no entry for that day"}},
)
async def get_entry(
    project_id: UUID,
    day: DayNumber,
    actor: OptionalActor,
    projects: ProjectServiceDep,
    entries: EntryServiceDep,
) -> EntryRead:
    project = await projects.get_project(project_id, actor)
    entry = await entries.get_entry(project, day)
    if entry is None:
        raise NotFound(f"No entry for day {day}")
    return EntryRead.model_validate(entry)


@router.put(
    "/{project_id}/entries/{day}",
    response_model=EntryRead,
    summary="Write the entry for a day",
    description="Create the day's entry, or replace its text if it already exists.",
    responses={
        403: {"description": "Caller is not the project owner, public or private"},
        404: {"description": "Project not found"},
        422: {"description": "Day out of range or blank entry"},
    },
)
async def upsert_entry(
    project_id: UUID,
    day: DayNumber,
    request: EntryWrite,
    actor: Actor,
    projects: ProjectServiceDep,
    entries: EntryServiceDep,
) -> EntryRead:
    project = await projects.get_for_write(project_id)
    entry = await entries.upsert_entry(actor, project, day, request.content)
    return EntryRead.model_validate(entry)


@router.put(
    "/{project_id}/entries/{day}/image",
    response_model=EntryRead,
    summary="Attach an image to a day",
    description=(
        "Upload raw image bytes as the request body. The image is stored first "
        "and then attached to the day's entry, which is created if needed."
    ),
    responses={
        403: {"description": "Caller is not the project owner, public or private"},
        404: {"description": "Project not found"},
        413: {"description": "Image too large"},
        503: {"description": "Image storage unavailable, retry later"},
    },
)
@limiter.limit(lambda: get_settings().image_upload_rate_limit)
async def attach_entry_image(
    request: Request,
    project_id: UUID,
    day: DayNumber,
    actor: Actor,
    projects: ProjectServiceDep,
    entries: EntryServiceDep,
) -> EntryRead:
    project = await projects.get_for_write(project_id)
    entries.check_writable(actor, project, day)
    data = await _read_image_body(request, get_settings().max_image_bytes)
    entry = await entries.attach_image_bytes(
        actor, project, day, data, request.headers.get("content-type")
    )
    return EntryRead.model_validate(entry)
