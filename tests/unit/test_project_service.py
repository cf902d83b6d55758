"""Unit tests for ProjectService."""

from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.daybook.core.exceptions import Forbidden, InvalidDuration, InvalidTitle, NotFound
from src.daybook.services.project_service import ProjectService
from tests.factories import ProjectFactory, generate_uuid

pytestmark = pytest.mark.unit


@pytest.fixture
def mock_project_repo() -> MagicMock:
    repo = MagicMock()
    repo.add = MagicMock(side_effect=lambda project: project)
    repo.get_by_id = AsyncMock(return_value=None)
    repo.list_by_owner = AsyncMock(return_value=[])
    repo.list_public = AsyncMock(return_value=[])
    return repo


@pytest.fixture
def mock_session() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def project_service(mock_project_repo, mock_session) -> ProjectService:
    return ProjectService(mock_project_repo, mock_session)


class TestCreateProject:
    async def test_creates_project_owned_by_actor(self, project_service, owner_id):
        project = await project_service.create_project(
            owner_id, "  Learn to juggle  ", description="  three balls ", duration_days=14
        )

        assert project.owner_id == owner_id
        assert project.title == "Learn to juggle"
        assert project.description == "three balls"
        assert project.duration_days == 14
        assert project.is_public is True

    async def test_blank_description_is_stored_as_none(self, project_service, owner_id):
        project = await project_service.create_project(owner_id, "Run", description="   ")

        assert project.description is None

    async def test_explicit_start_date_is_kept(self, project_service, owner_id):
        project = await project_service.create_project(
            owner_id, "Run", start_date=date(2025, 3, 1)
        )

        assert project.start_date == date(2025, 3, 1)

    async def test_anonymous_cannot_create(self, project_service, mock_project_repo):
        with pytest.raises(Forbidden):
            await project_service.create_project(None, "Run")
        mock_project_repo.add.assert_not_called()

    @pytest.mark.parametrize("title", ["", "   ", "\t"])
    async def test_blank_title_is_rejected(self, project_service, owner_id, title):
        with pytest.raises(InvalidTitle):
            await project_service.create_project(owner_id, title)

    @pytest.mark.parametrize("duration", [0, 1, 10, 30, -7])
    async def test_unsupported_duration_is_rejected(
        self, project_service, mock_project_repo, owner_id, duration
    ):
        with pytest.raises(InvalidDuration):
            await project_service.create_project(owner_id, "Run", duration_days=duration)
        mock_project_repo.add.assert_not_called()

    @pytest.mark.parametrize("duration", [7, 14, 21, 28])
    async def test_supported_durations_are_accepted(self, project_service, owner_id, duration):
        project = await project_service.create_project(owner_id, "Run", duration_days=duration)

        assert project.duration_days == duration

    async def test_configured_durations_replace_defaults(
        self, mock_project_repo, mock_session, owner_id
    ):
        service = ProjectService(mock_project_repo, mock_session, supported_durations=[5])

        project = await service.create_project(owner_id, "Sprint", duration_days=5)
        assert project.duration_days == 5
        with pytest.raises(InvalidDuration):
            await service.create_project(owner_id, "Sprint", duration_days=7)


class TestGetProject:
    async def test_missing_project_is_not_found(self, project_service, owner_id):
        with pytest.raises(NotFound):
            await project_service.get_project(generate_uuid(), owner_id)

    async def test_private_project_hidden_from_others(
        self, project_service, mock_project_repo, owner_id, other_user_id
    ):
        mock_project_repo.get_by_id.return_value = ProjectFactory.private(owner_id=owner_id)

        with pytest.raises(NotFound):
            await project_service.get_project(generate_uuid(), other_user_id)
        with pytest.raises(NotFound):
            await project_service.get_project(generate_uuid(), None)

    async def test_private_project_visible_to_owner(
        self, project_service, mock_project_repo, owner_id
    ):
        project = ProjectFactory.private(owner_id=owner_id)
        mock_project_repo.get_by_id.return_value = project

        assert await project_service.get_project(project.id, owner_id) is project

    async def test_public_project_visible_to_anonymous(
        self, project_service, mock_project_repo, owner_id
    ):
        project = ProjectFactory.build(owner_id=owner_id)
        mock_project_repo.get_by_id.return_value = project

        assert await project_service.get_project(project.id, None) is project


class TestListings:
    async def test_list_owned_requires_actor(self, project_service):
        with pytest.raises(Forbidden):
            await project_service.list_owned(None)

    async def test_list_owned_passes_limit(self, project_service, mock_project_repo, owner_id):
        await project_service.list_owned(owner_id, limit=5)

        mock_project_repo.list_by_owner.assert_awaited_once_with(owner_id, 5)

    async def test_list_public(self, project_service, mock_project_repo):
        await project_service.list_public()

        mock_project_repo.list_public.assert_awaited_once_with(None)


class TestGetForWrite:
    async def test_missing_project_is_not_found(self, project_service):
        with pytest.raises(NotFound):
            await project_service.get_for_write(generate_uuid())

    async def test_private_project_is_returned_without_visibility_check(
        self, project_service, mock_project_repo, owner_id
    ):
        project = ProjectFactory.private(owner_id=owner_id)
        mock_project_repo.get_by_id.return_value = project

        assert await project_service.get_for_write(project.id) is project
