"""magazine_type/news_type 분류 태그 정규화 유틸리티."""

from typing import Any, Dict, Optional

MAGAZINE_TYPE = "magazine_type"
NEWS_TYPE = "news_type"

INVALID = "invalid"

_ALIASES: Dict[str, Dict[str, str]] = {
    MAGAZINE_TYPE: {
        "magazine": "magazine",
        "mag": "magazine",
        "magazine2": "magazine2",
        "mag2": "magazine2",
    },
    NEWS_TYPE: {
        "statenews": "statenews",
        "state": "statenews",
        "state_news": "statenews",
        "districtnews": "districtnews",
        "district": "districtnews",
        "district_news": "districtnews",
        "specialnews": "specialnews",
        "special": "specialnews",
        "special_news": "specialnews",
    },
}

_INVALID_MESSAGES = {
    MAGAZINE_TYPE: "유효하지 않은 magazine_type 입니다. 'magazine' 또는 'magazine2'를 사용하세요.",
    NEWS_TYPE: "유효하지 않은 news_type 입니다. 'statenews', 'districtnews', 'specialnews' 중 하나를 사용하세요.",
}

TAG_FIELDS = tuple(_ALIASES)


def normalize(kind: str, raw: Any) -> Optional[str]:
    """별칭을 정규값으로 바꾼다. None/공백이면 None, 매칭 실패 시 INVALID를 돌려준다."""
    if raw is None:
        return None
    text = str(raw).strip().lower()
    if not text:
        return None
    return _ALIASES[kind].get(text, INVALID)


def canonical_values(kind: str) -> set:
    return set(_ALIASES[kind].values())


def invalid_message(kind: str) -> str:
    return _INVALID_MESSAGES[kind]
