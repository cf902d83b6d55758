"""Visibility and ownership rules.

Pure predicates over (actor id or None, project snapshot). Callers that
get ``False`` from ``can_read`` must report the project as missing rather
than forbidden so private projects do not leak their existence.
"""

from uuid import UUID

from src.daybook.models import Project


def can_read(actor: UUID | None, project: Project) -> bool:
    return project.is_public or (actor is not None and actor == project.owner_id)


def can_write(actor: UUID | None, project: Project) -> bool:
    return actor is not None and actor == project.owner_id


def can_comment(actor: UUID | None, project: Project) -> bool:
    return actor is not None and can_read(actor, project)
