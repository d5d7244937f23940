import json

from pytest import fixture, mark

from src.recipe_finder.data_manager import FavoritesStore, InMemoryStorage, _safe_json_loads
from src.recipe_finder.favorites import is_favorite, toggle_favorite
from src.recipe_finder.models import MealDetail, MealSummary


@fixture
def favorites():
    return [
        MealSummary("1", "Teriyaki Chicken", "1.jpg"),
        MealSummary("2", "Beef Stew", "2.jpg"),
    ]


def test_toggle_adds_at_end(favorites):
    meal = MealSummary("3", "Pancakes")
    assert toggle_favorite(favorites, meal) == [*favorites, meal]


def test_toggle_removes_by_id_only(favorites):
    renamed = MealSummary("1", "Something else", "other.jpg")
    assert toggle_favorite(favorites, renamed) == [favorites[1]]


def test_toggle_does_not_mutate(favorites):
    before = list(favorites)
    toggle_favorite(favorites, MealSummary("9", "x"))
    toggle_favorite(favorites, favorites[0])
    assert favorites == before


def test_toggle_twice_is_identity(favorites):
    meal = MealSummary("3", "Pancakes")
    assert toggle_favorite(toggle_favorite(favorites, meal), meal) == favorites
    assert toggle_favorite(toggle_favorite(favorites, favorites[-1]), favorites[-1]) == favorites


def test_is_favorite(favorites):
    assert is_favorite(favorites, "2")
    assert not is_favorite(favorites, "3")
    assert not is_favorite([], "1")


def test_store_missing_value(store):
    assert store.load() == []


@mark.parametrize("raw", ["{not json", "42", '{"id": "1"}', "null", ""])
def test_store_corrupt_value(raw):
    assert FavoritesStore(InMemoryStorage({"favorites": raw})).load() == []


def test_store_read_failure(mocker):
    storage = mocker.MagicMock()
    storage.getItem.side_effect = RuntimeError("component not ready")
    assert FavoritesStore(storage).load() == []


def test_store_round_trip(store, storage, favorites):
    store.save(favorites)
    assert json.loads(storage.getItem("favorites")) == [
        {"id": "1", "name": "Teriyaki Chicken", "thumbnail_url": "1.jpg"},
        {"id": "2", "name": "Beef Stew", "thumbnail_url": "2.jpg"},
    ]
    assert store.load() == favorites


def test_store_custom_key(storage):
    FavoritesStore(storage, key="my_favs").save([MealSummary("1", "a")])
    assert storage.getItem("favorites") is None
    assert storage.getItem("my_favs") is not None


def test_store_skips_bad_and_duplicate_records():
    raw = json.dumps([
        {"id": "1", "name": "a"},
        {"name": "no id"},
        "junk",
        {"id": "1", "name": "dup"},
        {"idMeal": "52874", "strMeal": "Beef Stew", "strMealThumb": "stew.jpg"},
    ])
    loaded = FavoritesStore(InMemoryStorage({"favorites": raw})).load()
    assert loaded == [MealSummary("1", "a"), MealSummary("52874", "Beef Stew", "stew.jpg")]


def test_store_accepts_already_parsed_list():
    storage = InMemoryStorage()
    storage.items["favorites"] = [{"id": "7", "name": "Soup"}]
    assert FavoritesStore(storage).load() == [MealSummary("7", "Soup")]


def test_safe_json_loads():
    assert _safe_json_loads(None) == []
    assert _safe_json_loads("[1, 2]") == [1, 2]
    assert _safe_json_loads("oops") == []


def test_detail_summary_for_storage():
    detail = MealDetail("5", "Soup", "soup.jpg", category="Starter", ingredients=(("Leek", "1"),))
    assert detail.summary().to_dict() == {"id": "5", "name": "Soup", "thumbnail_url": "soup.jpg"}


def test_store_has_value(store, storage):
    assert not store.has_value()
    storage.setItem("favorites", "[]")
    assert store.has_value()
