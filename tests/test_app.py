"""
Tests for the home page script.

These tests run recipe_app/app.py with Streamlit's AppTest and a mocked GET, and verify that:
- Nothing but the loading spinner renders before the fetch returns
- A loaded page renders header, tip, featured panel, action buttons and the grid
- A failed fetch renders the generic "no recipes" message
- The randomize button replaces the featured recipe
- Recipes sharing an id still render as separate cards
"""

from pathlib import Path
from unittest.mock import Mock, patch

import pytest
import requests
from streamlit.testing.v1 import AppTest

APP_PATH = str(Path(__file__).resolve().parent.parent / "recipe_app" / "app.py")

RECORDS = [
    {"id": "1", "recipeName": "Soup"},
    {"id": "3", "recipeName": "Pasta", "tip": "Salt the water"},
    {"id": "2", "recipeName": "Salad"},
]


@pytest.fixture(autouse=True)
def app_env(monkeypatch):
    monkeypatch.setenv("RECIPE_API_URL", "http://recipes.test/api/recipes")
    monkeypatch.setenv("APP_LANGUAGE", "ko")


def _response(records):
    response = Mock()
    response.json.return_value = records
    return response


def _markdown(at):
    return [m.value for m in at.markdown]


def _card_names(at):
    return [v[2:-2] for v in _markdown(at) if v.startswith("**") and v.endswith("**")]


def _run(records=None, side_effect=None):
    at = AppTest.from_file(APP_PATH, default_timeout=10)
    with patch("recipe_app.utils.api_client.requests.get",
               return_value=_response(records), side_effect=side_effect):
        at.run()
    return at


class TestHomePage:
    """Test cases for the rendered home page."""

    def test_nothing_renders_before_load_finishes(self):
        """Test that an interrupted load leaves the page without header, buttons or grid."""
        at = _run(side_effect=KeyError("interrupted"))

        assert at.exception
        assert "# 오늘 뭐 먹지?" not in _markdown(at)
        assert len(at.button) == 0

    def test_ready_page(self):
        """Test that a loaded page renders every section with the grid newest first."""
        with patch("recipe_app.utils.state.random") as mock_random:
            mock_random.Random.return_value.randrange.side_effect = [0, 0]
            at = _run(RECORDS)

        assert not at.exception
        markdown = _markdown(at)
        assert "# 오늘 뭐 먹지?" in markdown
        assert any("오늘의 팁: Salt the water" in v for v in markdown)
        assert "## Pasta" in markdown
        labels = [b.label for b in at.button]
        assert "🔄 다른 레시피 추천!" in labels
        assert "✨ 레시피 추가하기" in labels
        assert _card_names(at) == ["Pasta", "Salad", "Soup"]
        assert not any("표시할 레시피가 없습니다." in v for v in markdown)

    def test_fetch_failure_shows_generic_empty_state(self):
        """Test that a failed fetch renders the page with the generic empty-state message."""
        at = _run(side_effect=requests.exceptions.ConnectionError())

        assert not at.exception
        markdown = _markdown(at)
        assert "# 오늘 뭐 먹지?" in markdown
        assert any("표시할 레시피가 없습니다." in v for v in markdown)
        assert not any("에 대한 검색 결과가 없습니다." in v for v in markdown)
        assert not any(v.startswith("## ") and v != "## 모든 레시피" for v in markdown)
        assert _card_names(at) == []

    def test_unmatched_search_shows_search_empty_state(self):
        at = _run(RECORDS)
        at.text_input(key="recipe_search").input("curry").run()

        assert not at.exception
        assert any('"curry" 에 대한 검색 결과가 없습니다.' in v for v in _markdown(at))
        assert _card_names(at) == []

    def test_randomize_changes_featured_recipe(self):
        """Test that the randomize button swaps the featured panel."""
        with patch("recipe_app.utils.state.random") as mock_random:
            # load: featured, tip; click: new featured
            mock_random.Random.return_value.randrange.side_effect = [0, 0, 2]
            at = _run(RECORDS)
            assert "## Pasta" in _markdown(at)

            randomize = next(b for b in at.button if b.label == "🔄 다른 레시피 추천!")
            randomize.click().run()

        assert not at.exception
        assert "## Soup" in _markdown(at)
        assert "## Pasta" not in _markdown(at)

    def test_fetch_runs_once_across_reruns(self):
        """Test that interacting with the page does not fetch the collection again."""
        at = AppTest.from_file(APP_PATH, default_timeout=10)
        with patch("recipe_app.utils.api_client.requests.get", return_value=_response(RECORDS)) as mock_get:
            at.run()
            at.text_input(key="recipe_search").input("pas").run()

        assert mock_get.call_count == 1
        assert _card_names(at) == ["Pasta"]

    def test_recipes_sharing_an_id_render_as_separate_cards(self):
        """Test that duplicate or missing ids do not collide in the grid."""
        records = [
            {"id": "2", "recipeName": "first"},
            {"id": "2", "recipeName": "second"},
            {"id": "5", "recipeName": "third"},
            {"recipeName": "no id one"},
            {"recipeName": "no id two"},
        ]
        at = _run(records)

        assert not at.exception
        card_buttons = [b for b in at.button if b.key and b.key.startswith("recipe_card_")]
        assert len(card_buttons) == 5
        assert _card_names(at) == ["third", "first", "second", "no id one", "no id two"]
