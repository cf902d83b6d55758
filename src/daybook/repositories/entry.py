"""Repository for Entry entity."""

from typing import Any
from uuid import UUID, uuid4

from sqlalchemy.dialects import postgresql, sqlite
from sqlmodel import select

from src.daybook.models import Entry
from src.daybook.models.base import utc_now
from src.daybook.repositories.base import BaseRepository

_INSERT_BY_DIALECT: dict[str, Any] = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class EntryRepository(BaseRepository[Entry]):
    """Repository for Entry entity."""

    model = Entry

    async def get_for_day(self, project_id: UUID, day_number: int) -> Entry | None:
        result = await self.session.execute(
            select(Entry).where(Entry.project_id == project_id, Entry.day_number == day_number)
        )
        return result.scalar_one_or_none()

    async def list_for_project(self, project_id: UUID) -> list[Entry]:
        """List a project's entries ordered by day."""
        result = await self.session.execute(
            select(Entry)
            .where(Entry.project_id == project_id)
            .order_by(Entry.day_number.asc())  # type: ignore[attr-defined]
        )
        return list(result.scalars().all())

    async def upsert_for_day(
        self,
        project_id: UUID,
        day_number: int,
        content: str | None,
        image_url: str | None,
    ) -> Entry:
        """Insert the day's entry or update it in place, in one statement.

        Relies on the ``(project_id, day_number)`` unique constraint, so
        concurrent writers for the same day converge on a single row. An
        existing row keeps its id and created_at; ``content`` and
        ``image_url`` are only overwritten when given (not None).
        """
        dialect = self.session.get_bind().dialect.name
        try:
            insert = _INSERT_BY_DIALECT[dialect]
        except KeyError as e:
            raise NotImplementedError(f"Entry upsert is not supported on {dialect}") from e

        now = utc_now()
        stmt = insert(Entry).values(
            id=uuid4(),
            project_id=project_id,
            day_number=day_number,
            content=content if content is not None else "",
            image_url=image_url,
            created_at=now,
            updated_at=now,
        )
        changes = {"updated_at": stmt.excluded.updated_at}
        if content is not None:
            changes["content"] = stmt.excluded.content
        if image_url is not None:
            changes["image_url"] = stmt.excluded.image_url
        stmt = stmt.on_conflict_do_update(
            index_elements=["project_id", "day_number"],
            set_=changes,
        ).returning(Entry.id)

        result = await self.session.execute(stmt)
        entry_id = result.scalar_one()

        entry = await self.session.get(Entry, entry_id, populate_existing=True)
        if entry is None:  # pragma: no cover - the row was just written
            raise LookupError(f"Entry {entry_id} vanished after upsert")
        return entry
