"""
Translation lookup for user-facing strings.

Every string in the UI is written in the default language (Korean) and passed
through `t()`. The literal default string is the catalog key, so a missing
translation simply shows the original text.
"""

from typing import Callable, Dict, Optional

from recipe_app.config import DEFAULT_LANGUAGE, UiConfig

Translator = Callable[[str], str]

CATALOGS: Dict[str, Dict[str, str]] = {
    "en": {
        "맛있는 레시피를 불러오는 중...": "Loading delicious recipes...",
        "레시피 데이터를 불러오는 데 실패했습니다.": "Failed to load recipe data.",
        "오늘의 요리 팁을 확인해보세요!": "Check out today's cooking tip!",
        "오늘 뭐 먹지?": "What should I eat today?",
        "버튼을 눌러 오늘의 특별한 레시피를 추천받아보세요!": "Press the button to get today's special recipe!",
        "오늘의 팁": "Tip of the day",
        "오늘의 추천 레시피": "Today's pick",
        "레시피 보기": "View recipe",
        "다른 레시피 추천!": "Recommend another recipe!",
        "레시피 추가하기": "Add a recipe",
        "모든 레시피": "All recipes",
        "레시피 이름으로 검색...": "Search by recipe name...",
        "검색": "Search",
        "정렬": "Sort",
        "최신순": "Latest",
        "인기순": "Popularity",
        "평점순": "Rating",
        "리뷰 많은 순": "Most reviews",
        "에 대한 검색 결과가 없습니다.": "returned no results.",
        "표시할 레시피가 없습니다.": "No recipes to show.",
        "레시피를 찾을 수 없습니다.": "Recipe not found.",
        "홈으로 돌아가기": "Back to home",
        "재료": "Ingredients",
        "조리 순서": "Steps",
        "레시피 이름": "Recipe name",
        "설명": "Description",
        "팁": "Tip",
        "재료 (한 줄에 하나씩)": "Ingredients (one per line)",
        "조리 순서 (한 줄에 하나씩)": "Steps (one per line)",
        "저장하기": "Save",
        "레시피 이름을 입력해주세요.": "Please enter a recipe name.",
        "레시피가 저장되었습니다!": "Recipe saved!",
        "레시피를 저장하지 못했습니다.": "Could not save the recipe.",
        "새 레시피": "New recipe",
        "나만의 레시피를 공유해보세요.": "Share your own recipe.",
    },
}


def translate(text: str, language: Optional[str] = None) -> str:
    """
    Resolve `text` in `language` (defaults to APP_LANGUAGE).

    Returns `text` unchanged for the default language or a missing entry.
    """
    lang = (language or UiConfig.get_language()).lower()
    if lang == DEFAULT_LANGUAGE:
        return text
    return CATALOGS.get(lang, {}).get(text, text)


def get_translator(language: Optional[str] = None) -> Translator:
    """Return a one-argument lookup bound to `language`."""
    lang = language or UiConfig.get_language()
    return lambda text: translate(text, lang)


def t(text: str) -> str:
    return translate(text)
