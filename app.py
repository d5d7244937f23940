import logging

import streamlit as st
from streamlit_local_storage import LocalStorage

from src.recipe_finder.api_client import MealDBClient
from src.recipe_finder.config import get_settings
from src.recipe_finder.data_manager import FavoritesStore
from src.recipe_finder.favorites import is_favorite
from src.recipe_finder.search import SearchMode
from src.recipe_finder.state import (
    SearchStatus,
    initial_state,
    sync_favorites,
    open_meal_details,
    run_search,
    toggle_and_save,
)

STATE_KEY = "recipe_finder"
PENDING_TOGGLE_KEY = "pending_favorite"
RESULT_COLUMNS = 3

DARK_CSS = """
<style>
    .stApp, [data-testid="stHeader"] { background-color: #1e1b24; color: #f3eef8; }
    .stApp h1, .stApp h2, .stApp h3, .stApp h4, .stApp p, .stApp li, .stApp label {
        color: #f3eef8 !important;
    }
</style>
"""


def get_local_storage():
    return LocalStorage()


def queue_favorite_toggle(meal):
    st.session_state[PENDING_TOGGLE_KEY] = meal


def get_client() -> MealDBClient:
    settings = get_settings()
    return MealDBClient(base_url=settings.api_base_url, timeout=settings.request_timeout)


def main():
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    st.set_page_config(page_title="Recipe Finder", page_icon="🍰", layout="wide")

    store = FavoritesStore(get_local_storage(), settings.favorites_key)
    client = get_client()

    if STATE_KEY not in st.session_state:
        with st.spinner("Loading..."):
            st.session_state[STATE_KEY] = initial_state(store, settings, client)
    state = st.session_state[STATE_KEY]
    sync_favorites(state, store)

    # Favorite clicks are queued by button callbacks and saved here, mid-run.
    pending = st.session_state.pop(PENDING_TOGGLE_KEY, None)
    if pending is not None:
        toggle_and_save(state, store, pending)

    render_header(state)
    render_search(state, client)

    results_col, sidebar_col = st.columns([3, 2])
    with results_col:
        render_results(state, client)
    with sidebar_col:
        render_favorites(state, client)
        render_details(state)

    st.caption("Built using TheMealDB API")


def render_header(state):
    st.title("🍰 Recipe Finder")
    st.caption("From Pinterest inspo → Reality 🌸")
    state.dark_mode = st.toggle("🌙 Dark Mode", value=state.dark_mode, key="dark_mode")
    if state.dark_mode:
        st.markdown(DARK_CSS, unsafe_allow_html=True)


def render_search(state, client):
    modes = list(SearchMode)
    # Enter inside the text input submits the form.
    with st.form("search"):
        mode_col, query_col, button_col = st.columns([1, 3, 1])
        with mode_col:
            mode = st.selectbox(
                "Search by",
                modes,
                index=modes.index(state.mode),
                format_func=lambda m: m.label,
            )
        with query_col:
            query = st.text_input(
                "Search",
                value=state.query,
                placeholder=f"Search by {state.mode.label}",
            )
        with button_col:
            submitted = st.form_submit_button("Search")

    if submitted:
        with st.spinner("Loading..."):
            run_search(state, client, query, mode)

    if state.error_message:
        if state.search_status is SearchStatus.ERROR:
            st.error(state.error_message)
        else:
            st.warning(state.error_message)


def render_results(state, client):
    if not state.results:
        return

    st.subheader(f"Results ({len(state.results)})")
    columns = st.columns(RESULT_COLUMNS)
    for i, meal in enumerate(state.results):
        with columns[i % RESULT_COLUMNS]:
            show_meal_card(meal, state, client)


def show_meal_card(meal, state, client):
    with st.container(border=True):
        if meal.thumbnail_url:
            st.image(meal.thumbnail_url)
        st.markdown(f"**{meal.name}**")

        if st.button("View", key=f"view_{meal.id}"):
            with st.spinner("Loading..."):
                open_meal_details(state, client, meal.id)
            st.rerun()

        label = "Unfavorite" if is_favorite(state.favorites, meal.id) else "Favorite"
        st.button(label, key=f"fav_{meal.id}", on_click=queue_favorite_toggle, args=(meal,))


def render_favorites(state, client):
    st.subheader("Favorites")
    if not state.favorites:
        st.info("No favorites yet")
        return

    for meal in state.favorites:
        thumb_col, name_col = st.columns([1, 4])
        with thumb_col:
            if meal.thumbnail_url:
                st.image(meal.thumbnail_url, width=48)
        with name_col:
            if st.button(meal.name, key=f"favorite_{meal.id}"):
                with st.spinner("Loading..."):
                    open_meal_details(state, client, meal.id)
                st.rerun()


def render_details(state):
    st.subheader("Meal Details")
    if state.detail_error:
        st.error(state.detail_error)

    meal = state.selected_meal
    if meal is None:
        st.write("Select a meal to view details")
        return

    st.markdown(f"### {meal.name}")
    if meal.thumbnail_url:
        st.image(meal.thumbnail_url)
    st.markdown(
        f"**Category:** {meal.category or 'N/A'}  \n**Area:** {meal.area or 'N/A'}"
    )

    label = "Unfavorite" if is_favorite(state.favorites, meal.id) else "Favorite"
    st.button(label, key=f"detail_fav_{meal.id}", on_click=queue_favorite_toggle, args=(meal,))

    st.markdown("#### Ingredients")
    st.markdown(
        "\n".join(
            f"- {ingredient} – {measure}" if measure else f"- {ingredient}"
            for ingredient, measure in meal.ingredients
        )
    )
    st.markdown("#### Instructions")
    st.write(meal.instructions or "No instructions provided")


if __name__ == "__main__":
    main()
