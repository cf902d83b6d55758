"""Profile endpoints."""

from uuid import UUID

from fastapi import APIRouter

from src.daybook.api.dependencies import Actor, ProfileServiceDep
from src.daybook.core.exceptions import NotFound
from src.daybook.schemas import ProfileRead, ProfileUpdate

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get("/me", response_model=ProfileRead, summary="Get my profile")
async def get_my_profile(actor: Actor, profiles: ProfileServiceDep) -> ProfileRead:
    profile = await profiles.get_profile(actor)
    if profile is None:
        raise NotFound("You have not created a profile yet")
    return ProfileRead.model_validate(profile)


@router.put("/me", response_model=ProfileRead, summary="Create or update my profile")
async def put_my_profile(
    request: ProfileUpdate,
    actor: Actor,
    profiles: ProfileServiceDep,
) -> ProfileRead:
    profile = await profiles.upsert_own_profile(
        actor,
        username=request.username,
        display_name=request.display_name,
        bio=request.bio,
    )
    return ProfileRead.model_validate(profile)


@router.get("/{user_id}", response_model=ProfileRead, summary="Get a profile")
async def get_profile(user_id: UUID, profiles: ProfileServiceDep) -> ProfileRead:
    profile = await profiles.get_profile(user_id)
    if profile is None:
        raise NotFound(f"Profile {user_id} not found")
    return ProfileRead.model_validate(profile)
