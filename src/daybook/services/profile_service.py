"""Profile lookups used for attribution, and self-service profile edits."""

from collections.abc import Iterable
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.daybook.core.db import storage_errors
from src.daybook.core.exceptions import Forbidden, UsernameTaken
from src.daybook.core.logging import get_logger
from src.daybook.models import ANONYMOUS_NAME, Profile
from src.daybook.repositories import ProfileRepository

logger = get_logger(__name__)


class ProfileService:
    """Profile read model keyed by identity provider user id."""

    def __init__(self, profile_repo: ProfileRepository, session: AsyncSession):
        self.profile_repo = profile_repo
        self.session = session

    async def get_profile(self, user_id: UUID) -> Profile | None:
        async with storage_errors(self.session):
            return await self.profile_repo.get_by_id(user_id)

    async def display_name_of(self, user_id: UUID) -> str:
        profile = await self.get_profile(user_id)
        return profile.shown_name if profile else ANONYMOUS_NAME

    async def display_names(self, user_ids: Iterable[UUID]) -> dict[UUID, str]:
        """Resolve many user ids at once; unknown users map to "Anonymous"."""
        ids = set(user_ids)
        async with storage_errors(self.session):
            profiles = await self.profile_repo.get_many(ids)
        names = {p.id: p.shown_name for p in profiles}
        return {user_id: names.get(user_id, ANONYMOUS_NAME) for user_id in ids}

    async def _held_by_other(self, username: str, actor: UUID) -> bool:
        holder = await self.profile_repo.get_by_username(username)
        return holder is not None and holder.id != actor

    async def upsert_own_profile(
        self,
        actor: UUID | None,
        username: str | None = None,
        display_name: str | None = None,
        bio: str | None = None,
    ) -> Profile:
        """Create or update the actor's own profile.

        A new profile without a display name falls back to the username,
        as at signup. If a concurrent first save of the same profile wins
        the insert, the changes are applied to that row instead.

        Raises:
            Forbidden: actor is anonymous
            UsernameTaken: another user already holds ``username``
            StorageUnavailable: the database could not be reached
        """
        if actor is None:
            raise Forbidden("You must be signed in to edit your profile")

        async with storage_errors(self.session):
            try:
                profile = await self._save(actor, username, display_name, bio)
            except IntegrityError as e:
                if username is not None and await self._held_by_other(username, actor):
                    raise UsernameTaken() from e
                if await self.profile_repo.get_by_id(actor) is None:
                    raise
                logger.info("Profile created concurrently, updating", user_id=str(actor))
                profile = await self._save(actor, username, display_name, bio)

        logger.info("Profile saved", user_id=str(actor))
        return profile

    async def _save(
        self,
        actor: UUID,
        username: str | None,
        display_name: str | None,
        bio: str | None,
    ) -> Profile:
        profile = await self.profile_repo.get_by_id(actor)
        if profile is None:
            profile = Profile(
                id=actor,
                username=username,
                display_name=display_name or username,
                bio=bio,
            )
            self.profile_repo.add(profile)
        else:
            if username is not None:
                profile.username = username
            if display_name is not None:
                profile.display_name = display_name
            if bio is not None:
                profile.bio = bio

        try:
            await self.session.commit()
            await self.session.refresh(profile)
        except Exception:
            await self.session.rollback()
            raise
        return profile
