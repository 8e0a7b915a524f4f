"""
Search Configuration

Library-wide defaults for ranking calls, read from environment variables.
"""

import os


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"Invalid {name} value: '{raw}'. Must be an integer.")
    if value < 0:
        raise RuntimeError(f"Invalid {name} value: '{raw}'. Must not be negative.")
    return value


def _get_min_score() -> float:
    raw = os.getenv("FUZZY_MIN_SCORE")
    if raw is None or raw == "":
        return 0.01
    try:
        value = float(raw)
    except ValueError:
        raise RuntimeError(f"Invalid FUZZY_MIN_SCORE value: '{raw}'. Must be a number.")
    if not 0.0 <= value <= 1.0:
        raise RuntimeError(
            f"Invalid FUZZY_MIN_SCORE value: '{raw}'. Must be between 0 and 1."
        )
    return value


class SearchSettings:
    """Defaults applied when a search call leaves an option unset"""

    # Maximum number of results returned by search_items
    RESULT_LIMIT: int = _get_int("FUZZY_RESULT_LIMIT", 100)

    # Inclusive score floor for search_items
    MIN_SCORE: float = _get_min_score()

    # Truncate searchable text to this many characters (0 disables)
    MAX_TEXT_LENGTH: int = _get_int("FUZZY_MAX_TEXT_LENGTH", 0)


settings = SearchSettings()
