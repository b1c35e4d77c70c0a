"""Unit tests for FavouriteService."""

from uuid import uuid4

import pytest
import pytest_asyncio

from quiz.domain.error import AlreadyExistsError, NotFoundError, ValidationError
from quiz.domain.model import User
from quiz.domain.service import FavouriteService, UserService
from quiz.domain.value import FavouriteEntry, UserId
from quiz.persistence.repository.inmemory import InMemoryUserRepository


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def favourite_service(user_repo: InMemoryUserRepository) -> FavouriteService:
    return FavouriteService(user_repo, UserService(user_repo))


@pytest_asyncio.fixture
async def user(user_repo: InMemoryUserRepository) -> User:
    user = User(
        id=UserId(uuid4()),
        email="ada@example.com",
        full_name="Ada",
        password_hash="$2b$04$hash",
    )
    return await user_repo.save(user)


class TestAddFavourite:
    """Tests for FavouriteService.add_favourite()."""

    @pytest.mark.asyncio
    async def test_fields_stored_verbatim(self, favourite_service, user):
        favourites = await favourite_service.add_favourite(
            user.id,
            question="What is 2+2?",
            options=["3", "4", "5"],
            answer="4",
            external_id="q-1",
        )

        assert len(favourites) == 1
        assert favourites[0].question == "What is 2+2?"
        assert favourites[0].options == ["3", "4", "5"]
        assert favourites[0].answer == "4"
        assert favourites[0].external_id == "q-1"

    @pytest.mark.asyncio
    async def test_duplicate_external_id_rejected(self, favourite_service, user):
        await favourite_service.add_favourite(user.id, "Q1", ["a"], "a", "q-1")

        with pytest.raises(AlreadyExistsError, match="Already in favourites"):
            await favourite_service.add_favourite(
                user.id, "Different text", ["b"], "b", "q-1"
            )

    @pytest.mark.asyncio
    async def test_duplicate_question_without_id_rejected(
        self, favourite_service, user
    ):
        await favourite_service.add_favourite(user.id, "Q1", ["a"], "a")

        with pytest.raises(AlreadyExistsError):
            await favourite_service.add_favourite(user.id, "Q1", ["a", "b"], "b")

    @pytest.mark.asyncio
    async def test_same_question_with_new_id_is_not_a_duplicate(
        self, favourite_service, user
    ):
        """An incoming external id is only compared against external ids."""
        await favourite_service.add_favourite(user.id, "Q1", ["a"], "a")

        favourites = await favourite_service.add_favourite(
            user.id, "Q1", ["a"], "a", "q-9"
        )

        assert len(favourites) == 2

    @pytest.mark.asyncio
    async def test_missing_options_default_to_empty(self, favourite_service, user):
        favourites = await favourite_service.add_favourite(user.id, "Q1", None, "a")

        assert favourites[0].options == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("question,answer", [(None, "a"), ("Q1", None), ("", "a")])
    async def test_missing_fields_rejected(
        self, favourite_service, user, question, answer
    ):
        with pytest.raises(ValidationError, match="required"):
            await favourite_service.add_favourite(user.id, question, [], answer)

    @pytest.mark.asyncio
    async def test_unknown_user(self, favourite_service):
        with pytest.raises(NotFoundError):
            await favourite_service.add_favourite(UserId(uuid4()), "Q1", [], "a")


class TestRemoveFavourite:
    """Tests for FavouriteService.remove_favourite()."""

    @pytest.mark.asyncio
    async def test_remove_by_external_id(self, favourite_service, user):
        await favourite_service.add_favourite(user.id, "Q1", [], "a", "q-1")
        await favourite_service.add_favourite(user.id, "Q2", [], "b", "q-2")

        favourites = await favourite_service.remove_favourite(user.id, "q-1")

        assert [f.external_id for f in favourites] == ["q-2"]

    @pytest.mark.asyncio
    async def test_remove_by_question_when_entry_has_no_id(
        self, favourite_service, user
    ):
        await favourite_service.add_favourite(user.id, "Q1", [], "a")

        favourites = await favourite_service.remove_favourite(user.id, "Q1")

        assert favourites == []

    @pytest.mark.asyncio
    async def test_question_text_does_not_address_entry_with_id(
        self, favourite_service, user
    ):
        await favourite_service.add_favourite(user.id, "Q1", [], "a", "q-1")

        favourites = await favourite_service.remove_favourite(user.id, "Q1")

        assert len(favourites) == 1

    @pytest.mark.asyncio
    async def test_non_matching_key_is_a_no_op(self, favourite_service, user):
        await favourite_service.add_favourite(user.id, "Q1", [], "a", "q-1")

        favourites = await favourite_service.remove_favourite(user.id, "missing")

        assert len(favourites) == 1

    @pytest.mark.asyncio
    async def test_unknown_user(self, favourite_service):
        with pytest.raises(NotFoundError):
            await favourite_service.remove_favourite(UserId(uuid4()), "q-1")


class TestClearFavourites:
    """Tests for FavouriteService.clear_favourites()."""

    @pytest.mark.asyncio
    async def test_clear_is_repeatable(self, favourite_service, user):
        await favourite_service.add_favourite(user.id, "Q1", [], "a")
        await favourite_service.add_favourite(user.id, "Q2", [], "b")

        assert await favourite_service.clear_favourites(user.id) == []
        assert await favourite_service.clear_favourites(user.id) == []
        assert await favourite_service.list_favourites(user.id) == []

    @pytest.mark.asyncio
    async def test_unknown_user(self, favourite_service):
        with pytest.raises(NotFoundError):
            await favourite_service.clear_favourites(UserId(uuid4()))


class TestFavouriteEntry:
    """Tests for FavouriteEntry key matching."""

    def test_entry_with_id_is_matched_by_id_only(self):
        entry = FavouriteEntry(question="Q1", answer="a", external_id="q-1")

        assert entry.matches_key("q-1")
        assert not entry.matches_key("Q1")

    def test_entry_without_id_is_matched_by_question(self):
        entry = FavouriteEntry(question="Q1", answer="a")

        assert entry.matches_key("Q1")
        assert entry.is_duplicate_of("Q1", None)
        assert not entry.is_duplicate_of("Q1", "q-1")
