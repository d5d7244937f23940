from pytest import fixture

from src.recipe_finder.api_client import MealDBClient
from src.recipe_finder.data_manager import FavoritesStore, InMemoryStorage


@fixture
def mocked_requests(mocker):
    return mocker.patch("src.recipe_finder.api_client.requests")


@fixture
def client():
    return MealDBClient(base_url="test/", timeout=5)


@fixture
def storage():
    return InMemoryStorage()


@fixture
def store(storage):
    return FavoritesStore(storage)


@fixture
def respond(mocked_requests):
    """Make every mocked GET answer with `body`."""

    def _respond(body):
        mocked_requests.get.return_value.ok = True
        mocked_requests.get.return_value.json.return_value = body
        return mocked_requests

    return _respond
