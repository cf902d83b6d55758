"""Day-keyed journal entries: upsert, image association and reads."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.daybook.core.db import storage_errors
from src.daybook.core.exceptions import EmptyEntry, Forbidden, InvalidDay
from src.daybook.core.logging import get_logger
from src.daybook.core.storage import ObjectStore, image_key
from src.daybook.models import Entry, Project
from src.daybook.repositories import EntryRepository
from src.daybook.services.guard import can_write

logger = get_logger(__name__)


class EntryService:
    """Entry store - enforces one entry per project day."""

    def __init__(
        self,
        entry_repo: EntryRepository,
        session: AsyncSession,
        object_store: ObjectStore | None = None,
    ):
        self.entry_repo = entry_repo
        self.session = session
        self.object_store = object_store

    @staticmethod
    def check_writable(actor: UUID | None, project: Project, day: int) -> None:
        """Raise Forbidden for non-owners, then InvalidDay for out-of-range days."""
        if not can_write(actor, project):
            raise Forbidden("Only the project owner can edit entries")
        if not 1 <= day <= project.duration_days:
            raise InvalidDay(f"Day must be between 1 and {project.duration_days}, got {day}")

    async def upsert_entry(
        self,
        actor: UUID | None,
        project: Project,
        day: int,
        content: str,
        image_ref: str | None = None,
    ) -> Entry:
        """Create the day's entry or update it in place.

        Args:
            actor: Id of the calling user, None when anonymous
            project: Project the entry belongs to
            day: Day number, 1..project.duration_days
            content: Entry text; may be blank only when image_ref is given
            image_ref: URL of an already stored image to associate

        Returns:
            The single entry for that day, with its original id and created_at
            when it already existed.

        Raises:
            Forbidden: actor is not the project owner
            InvalidDay: day is outside the project's duration
            EmptyEntry: content is blank and no image is given
            StorageUnavailable: the database could not be reached
        """
        self.check_writable(actor, project, day)
        if not content.strip() and not image_ref:
            raise EmptyEntry()

        entry = await self._write(project, day, content, image_ref)
        logger.info(
            "Entry upserted",
            project_id=str(project.id),
            day=day,
            entry_id=str(entry.id),
            with_image=image_ref is not None,
        )
        return entry

    async def attach_image(
        self,
        actor: UUID | None,
        project: Project,
        day: int,
        image_ref: str,
    ) -> Entry:
        """Associate a stored image with the day's entry.

        Creates the entry with empty content when the day has none yet, and
        leaves existing content untouched otherwise.
        """
        self.check_writable(actor, project, day)
        if not image_ref:
            raise EmptyEntry("Image reference cannot be empty")

        entry = await self._write(project, day, None, image_ref)
        logger.info(
            "Entry image attached",
            project_id=str(project.id),
            day=day,
            entry_id=str(entry.id),
        )
        return entry

    async def attach_image_bytes(
        self,
        actor: UUID | None,
        project: Project,
        day: int,
        data: bytes,
        content_type: str | None = None,
    ) -> Entry:
        """Store image bytes in the object store, then associate the URL.

        The entry row is only written once the store has returned a URL. If
        the association fails afterwards the stored blob is left unreferenced;
        an entry never points at an image that was not stored.
        """
        self.check_writable(actor, project, day)
        if not data:
            raise EmptyEntry("Image upload is empty")
        if self.object_store is None:
            raise RuntimeError("EntryService was created without an object store")

        key = image_key(project.id, day, content_type)
        url = await self.object_store.put(key, data, content_type)
        return await self.attach_image(actor, project, day, url)

    async def _write(
        self, project: Project, day: int, content: str | None, image_ref: str | None
    ) -> Entry:
        async with storage_errors(self.session):
            try:
                entry = await self.entry_repo.upsert_for_day(project.id, day, content, image_ref)
                await self.session.commit()
            except Exception:
                await self.session.rollback()
                raise
        return entry

    async def get_entry(self, project: Project, day: int) -> Entry | None:
        """Get the day's entry; days outside the project have none."""
        if not 1 <= day <= project.duration_days:
            return None
        async with storage_errors(self.session):
            return await self.entry_repo.get_for_day(project.id, day)

    async def get_entry_by_id(self, entry_id: UUID) -> Entry | None:
        async with storage_errors(self.session):
            return await self.entry_repo.get_by_id(entry_id)

    async def list_entries(self, project: Project) -> list[Entry]:
        """List the project's entries ordered by day number."""
        async with storage_errors(self.session):
            return await self.entry_repo.list_for_project(project.id)
