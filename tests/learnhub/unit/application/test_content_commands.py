"""Unit tests for content commands and queries.

Tests verify:
- Cross-aggregate checks run in order and stop before any write
- Case-insensitive title uniqueness on create and update
- Type changes, deletion, listing and search
"""

from uuid import uuid4

import pytest

from learnhub.application.commands.content import (
    ChangeContentTypeCommand,
    CreateContentCommand,
    DeleteContentCommand,
    UpdateContentCommand,
)
from learnhub.application.queries.content import (
    GetContentQuery,
    ListContentQuery,
    SearchContentQuery,
)
from learnhub.domain.content import (
    CategoryNotFoundError,
    ContentNotFoundError,
    ContentTitleAlreadyExistsError,
    InactiveCreatorError,
    InvalidContentTypeError,
)
from learnhub.domain.shared.exceptions import (
    FieldValidationError,
    InvalidFormatError,
)
from learnhub_identity.domain.user import UserNotFoundError
from tests.shared.fixtures import make_category, make_user


@pytest.fixture
async def category(factory):
    category = make_category()
    await factory.categories.add(category)
    return category


@pytest.fixture
async def author(factory):
    author = make_user()
    await factory.users.save(author)
    return author


async def _create(factory, category, author, **overrides):
    fields = {
        "title": "Intro",
        "description": "First steps",
        "type": "text",
        "topic": str(category.id),
        "created_by": str(author.id),
    }
    fields.update(overrides)
    return await CreateContentCommand.from_factory(factory).execute(**fields)


class TestCreateContentCommand:
    """Tests for CreateContentCommand."""

    @pytest.mark.asyncio
    async def test_creates_content(self, factory, category, author):
        dto = await _create(factory, category, author, type="VIDEO")

        assert dto.title == "Intro"
        assert dto.type == "video"
        assert dto.topic == str(category.id)
        assert dto.created_by == str(author.id)
        assert len(factory.contents.writes) == 1

    @pytest.mark.asyncio
    async def test_missing_topic_fails_before_any_write(self, factory, author):
        """An unknown category stops creation without touching storage."""
        with pytest.raises(CategoryNotFoundError):
            await CreateContentCommand.from_factory(factory).execute(
                title="Intro",
                description=None,
                type="text",
                topic=str(uuid4()),
                created_by=str(author.id),
            )

        assert factory.contents.writes == []
        assert factory.contents.searches == []

    @pytest.mark.asyncio
    async def test_malformed_topic_rejected(self, factory, author):
        with pytest.raises(InvalidFormatError):
            await CreateContentCommand.from_factory(factory).execute(
                title="Intro",
                description=None,
                type="text",
                topic="python",
                created_by=str(author.id),
            )

    @pytest.mark.asyncio
    async def test_title_conflict_ignores_case(self, factory, category, author):
        """'Intro' exists so 'intro' is refused."""
        await _create(factory, category, author, title="Intro")

        with pytest.raises(ContentTitleAlreadyExistsError):
            await _create(factory, category, author, title="intro")

        assert len(factory.contents.contents) == 1

    @pytest.mark.asyncio
    async def test_title_checked_before_creator(self, factory, category):
        """With a taken title and an unknown creator the title error wins."""
        author = make_user()
        await factory.users.save(author)
        await _create(factory, category, author, title="Intro")

        with pytest.raises(ContentTitleAlreadyExistsError):
            await _create(
                factory, category, author, title="INTRO", created_by=str(uuid4())
            )

    @pytest.mark.asyncio
    async def test_unknown_creator_not_found(self, factory, category):
        with pytest.raises(UserNotFoundError):
            await CreateContentCommand.from_factory(factory).execute(
                title="Intro",
                description=None,
                type="text",
                topic=str(category.id),
                created_by=str(uuid4()),
            )

        assert factory.contents.writes == []

    @pytest.mark.asyncio
    async def test_inactive_creator_rejected(self, factory, category):
        author = make_user(active=False)
        await factory.users.save(author)

        with pytest.raises(InactiveCreatorError):
            await _create(factory, category, author)

        assert factory.contents.writes == []

    @pytest.mark.asyncio
    async def test_unsupported_type_rejected(self, factory, category, author):
        with pytest.raises(InvalidContentTypeError):
            await _create(factory, category, author, type="podcast")

        assert factory.contents.writes == []

    @pytest.mark.asyncio
    async def test_creator_checked_before_type(self, factory, category, author):
        """With an unknown creator and an unsupported type the creator error wins."""
        with pytest.raises(UserNotFoundError):
            await _create(
                factory, category, author, type="podcast", created_by=str(uuid4())
            )

        assert factory.contents.writes == []


class TestUpdateContentCommand:
    """Tests for UpdateContentCommand."""

    @pytest.mark.asyncio
    async def test_update_fields(self, factory, category, author):
        created = await _create(factory, category, author)
        other = make_category(name="Rust")
        await factory.categories.add(other)

        updated = await UpdateContentCommand.from_factory(factory).execute(
            content_id=created.id,
            title="Ownership",
            description=None,
            topic=str(other.id),
        )

        assert updated.id == created.id
        assert updated.title == "Ownership"
        assert updated.description is None
        assert updated.topic == str(other.id)
        assert updated.created_by == created.created_by
        assert updated.created_at == created.created_at
        assert updated.updated_at >= created.updated_at

    @pytest.mark.asyncio
    async def test_content_may_keep_its_own_title(self, factory, category, author):
        """Re-saving 'Intro' as 'INTRO' does not conflict with itself."""
        created = await _create(factory, category, author)

        updated = await UpdateContentCommand.from_factory(factory).execute(
            content_id=created.id,
            title="INTRO",
            description="Changed",
            topic=str(category.id),
        )

        assert updated.title == "INTRO"
        assert updated.description == "Changed"

    @pytest.mark.asyncio
    async def test_taking_another_title_conflicts(self, factory, category, author):
        await _create(factory, category, author, title="Intro")
        second = await _create(factory, category, author, title="Advanced")

        with pytest.raises(ContentTitleAlreadyExistsError):
            await UpdateContentCommand.from_factory(factory).execute(
                content_id=second.id,
                title="intro",
                description=None,
                topic=str(category.id),
            )

        stored = await GetContentQuery.from_factory(factory).execute(second.id)
        assert stored.title == "Advanced"

    @pytest.mark.asyncio
    async def test_missing_topic_rejected(self, factory, category, author):
        created = await _create(factory, category, author)
        writes_before = list(factory.contents.writes)

        with pytest.raises(CategoryNotFoundError):
            await UpdateContentCommand.from_factory(factory).execute(
                content_id=created.id,
                title="Intro",
                description=None,
                topic=str(uuid4()),
            )

        assert factory.contents.writes == writes_before

    @pytest.mark.asyncio
    async def test_topic_checked_before_title(self, factory, category, author):
        """With a missing topic and a taken title the topic error wins."""
        await _create(factory, category, author, title="Intro")
        second = await _create(factory, category, author, title="Advanced")

        with pytest.raises(CategoryNotFoundError):
            await UpdateContentCommand.from_factory(factory).execute(
                content_id=second.id,
                title="intro",
                description=None,
                topic=str(uuid4()),
            )

        stored = await GetContentQuery.from_factory(factory).execute(second.id)
        assert stored.title == "Advanced"

    @pytest.mark.asyncio
    async def test_blank_title_rejected(self, factory, category, author):
        created = await _create(factory, category, author)

        with pytest.raises(FieldValidationError):
            await UpdateContentCommand.from_factory(factory).execute(
                content_id=created.id,
                title="  ",
                description=None,
                topic=str(category.id),
            )

    @pytest.mark.asyncio
    async def test_inactive_creator_does_not_block_update(
        self, factory, category, author
    ):
        created = await _create(factory, category, author)
        author.deactivate()

        updated = await UpdateContentCommand.from_factory(factory).execute(
            content_id=created.id,
            title="Intro v2",
            description=None,
            topic=str(category.id),
        )

        assert updated.title == "Intro v2"

    @pytest.mark.asyncio
    async def test_missing_content_not_found(self, factory, category):
        with pytest.raises(ContentNotFoundError):
            await UpdateContentCommand.from_factory(factory).execute(
                content_id=uuid4(),
                title="Intro",
                description=None,
                topic=str(category.id),
            )


class TestChangeAndDelete:
    """Tests for ChangeContentTypeCommand and DeleteContentCommand."""

    @pytest.mark.asyncio
    async def test_change_type(self, factory, category, author):
        created = await _create(factory, category, author, type="text")

        dto = await ChangeContentTypeCommand.from_factory(factory).execute(
            content_id=created.id,
            new_type="Interactive_Lab",
        )

        assert dto.type == "interactive_lab"

    @pytest.mark.asyncio
    async def test_change_to_unknown_type(self, factory, category, author):
        created = await _create(factory, category, author)

        with pytest.raises(InvalidContentTypeError):
            await ChangeContentTypeCommand.from_factory(factory).execute(
                content_id=created.id,
                new_type="podcast",
            )

    @pytest.mark.asyncio
    async def test_delete(self, factory, category, author):
        created = await _create(factory, category, author)

        await DeleteContentCommand.from_factory(factory).execute(created.id)

        assert await ListContentQuery.from_factory(factory).execute() == []

    @pytest.mark.asyncio
    async def test_delete_missing_not_found(self, factory):
        with pytest.raises(ContentNotFoundError):
            await DeleteContentCommand.from_factory(factory).execute(uuid4())


class TestContentQueries:
    """Tests for GetContentQuery, ListContentQuery and SearchContentQuery."""

    @pytest.mark.asyncio
    async def test_get_missing_not_found(self, factory):
        with pytest.raises(ContentNotFoundError):
            await GetContentQuery.from_factory(factory).execute(uuid4())

    @pytest.mark.asyncio
    async def test_search_matches_title_or_description(
        self, factory, category, author
    ):
        await _create(factory, category, author, title="Intro", description="basics")
        await _create(
            factory, category, author, title="Decorators", description="Advanced"
        )
        await _create(factory, category, author, title="Generators", description=None)

        by_title = await SearchContentQuery.from_factory(factory).execute("INTRO")
        by_description = await SearchContentQuery.from_factory(factory).execute("adv")

        assert [c.title for c in by_title] == ["Intro"]
        assert [c.title for c in by_description] == ["Decorators"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", [None, "", "   "])
    async def test_blank_search_returns_everything(
        self, factory, category, author, text
    ):
        await _create(factory, category, author, title="Intro")
        await _create(factory, category, author, title="Advanced")

        result = await SearchContentQuery.from_factory(factory).execute(text)

        assert len(result) == 2
