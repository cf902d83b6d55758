"""Unit tests for CommentService."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from src.daybook.core.exceptions import EmptyComment, Forbidden, InvalidReference
from src.daybook.services.comment_service import CommentService
from tests.factories import EntryFactory, ProjectFactory, generate_uuid

pytestmark = pytest.mark.unit


@pytest.fixture
def mock_comment_repo() -> MagicMock:
    repo = MagicMock()
    repo.add = MagicMock(side_effect=lambda comment: comment)
    repo.list_for_entry = AsyncMock(return_value=[])
    return repo


@pytest.fixture
def mock_session() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def comment_service(mock_comment_repo, mock_session) -> CommentService:
    return CommentService(mock_comment_repo, mock_session)


class TestPostComment:
    async def test_non_owner_can_comment_on_public_project(
        self, comment_service, mock_comment_repo, mock_session, owner_id, other_user_id
    ):
        project = ProjectFactory.build(owner_id=owner_id)
        entry = EntryFactory.build(project_id=project.id)

        comment = await comment_service.post_comment(other_user_id, entry, project, "  Nice!  ")

        assert comment.author_id == other_user_id
        assert comment.entry_id == entry.id
        assert comment.content == "Nice!"
        mock_comment_repo.add.assert_called_once()
        mock_session.commit.assert_awaited_once()

    async def test_owner_can_comment_on_private_project(self, comment_service, owner_id):
        project = ProjectFactory.private(owner_id=owner_id)
        entry = EntryFactory.build(project_id=project.id)

        comment = await comment_service.post_comment(owner_id, entry, project, "note to self")

        assert comment.author_id == owner_id

    async def test_stranger_cannot_comment_on_private_project(
        self, comment_service, mock_comment_repo, owner_id, other_user_id
    ):
        project = ProjectFactory.private(owner_id=owner_id)
        entry = EntryFactory.build(project_id=project.id)

        with pytest.raises(Forbidden):
            await comment_service.post_comment(other_user_id, entry, project, "hi")
        mock_comment_repo.add.assert_not_called()

    async def test_anonymous_cannot_comment(self, comment_service, owner_id):
        project = ProjectFactory.build(owner_id=owner_id)
        entry = EntryFactory.build(project_id=project.id)

        with pytest.raises(Forbidden):
            await comment_service.post_comment(None, entry, project, "hi")

    @pytest.mark.parametrize("content", ["", "   ", "\n"])
    async def test_blank_comment_is_rejected(
        self, comment_service, mock_comment_repo, owner_id, content
    ):
        project = ProjectFactory.build(owner_id=owner_id)
        entry = EntryFactory.build(project_id=project.id)

        with pytest.raises(EmptyComment):
            await comment_service.post_comment(owner_id, entry, project, content)
        mock_comment_repo.add.assert_not_called()

    async def test_entry_from_another_project_is_rejected(
        self, comment_service, mock_comment_repo, owner_id
    ):
        project = ProjectFactory.build(owner_id=owner_id)
        entry = EntryFactory.build(project_id=generate_uuid())

        with pytest.raises(InvalidReference):
            await comment_service.post_comment(owner_id, entry, project, "hi")
        mock_comment_repo.add.assert_not_called()

    async def test_failed_commit_rolls_back(self, comment_service, mock_session, owner_id):
        project = ProjectFactory.build(owner_id=owner_id)
        entry = EntryFactory.build(project_id=project.id)
        mock_session.commit.side_effect = RuntimeError("boom")

        with pytest.raises(RuntimeError):
            await comment_service.post_comment(owner_id, entry, project, "hi")
        mock_session.rollback.assert_awaited_once()


async def test_list_comments_reads_entry_thread(comment_service, mock_comment_repo):
    entry = EntryFactory.build(project_id=generate_uuid())

    await comment_service.list_comments(entry)

    mock_comment_repo.list_for_entry.assert_awaited_once_with(entry.id)
