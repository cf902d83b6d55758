"""Comment endpoints, addressed by entry."""

from uuid import UUID

from fastapi import APIRouter, Request, status

from src.daybook.api.dependencies import (
    Actor,
    CommentServiceDep,
    EntryServiceDep,
    OptionalActor,
    ProfileServiceDep,
    ProjectServiceDep,
)
from src.daybook.core.config import get_settings
from src.daybook.core.exceptions import NotFound
from src.daybook.core.rate_limit import limiter
from src.daybook.models import Comment, Entry, Project
from src.daybook.schemas import CommentCreate, CommentRead
from src.daybook.services import EntryService, ProjectService

router = APIRouter(prefix="/entries", tags=["comments"])


async def _load_visible_entry(
    entry_id: UUID,
    actor: UUID | None,
    entries: EntryService,
    projects: ProjectService,
) -> tuple[Entry, Project]:
    entry = await entries.get_entry_by_id(entry_id)
    if entry is None:
        raise NotFound(f"Entry {entry_id} not found")
    try:
        project = await projects.get_project(entry.project_id, actor)
    except NotFound as e:
        raise NotFound(f"Entry {entry_id} not found") from e
    return entry, project


def _to_read(comment: Comment, author_name: str) -> CommentRead:
    return CommentRead(
        id=comment.id,
        entry_id=comment.entry_id,
        author_id=comment.author_id,
        author_name=author_name,
        content=comment.content,
        created_at=comment.created_at,
    )


@router.get(
    "/{entry_id}/comments",
    response_model=list[CommentRead],
    summary="List comments",
    description="List an entry's comments in the order they were posted.",
    responses={404: {"description": "Entry not found or its project is private"}},
)
async def list_comments(
    entry_id: UUID,
    actor: OptionalActor,
    entries: EntryServiceDep,
    projects: ProjectServiceDep,
    comments: CommentServiceDep,
    profiles: ProfileServiceDep,
) -> list[CommentRead]:
    entry, _ = await _load_visible_entry(entry_id, actor, entries, projects)
    thread = await comments.list_comments(entry)
    names = await profiles.display_names(c.author_id for c in thread)
    return [_to_read(c, names[c.author_id]) for c in thread]


@router.post(
    "/{entry_id}/comments",
    response_model=CommentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Post comment",
    responses={
        401: {"description": "Not authenticated"},
        404: {"description": "Entry not found or its project is private"},
        422: {"description": "Blank comment"},
    },
)
@limiter.limit(lambda: get_settings().comment_rate_limit)
async def post_comment(
    request: Request,
    entry_id: UUID,
    body: CommentCreate,
    actor: Actor,
    entries: EntryServiceDep,
    projects: ProjectServiceDep,
    comments: CommentServiceDep,
    profiles: ProfileServiceDep,
) -> CommentRead:
    entry, project = await _load_visible_entry(entry_id, actor, entries, projects)
    comment = await comments.post_comment(actor, entry, project, body.content)
    return _to_read(comment, await profiles.display_name_of(actor))
