"""
Fuzzy Ranking

Applies the alignment scorer across a collection of items, boosting matches
with keyword/alias strings, then filters and sorts the results.
"""

import json
import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from fuzzyrank.core import config
from fuzzyrank.core.text import fold_case, normalize_text
from fuzzyrank.search.scoring import FuzzyScorer
from fuzzyrank.search.weights import ScoringWeights

logger = logging.getLogger(__name__)

T = TypeVar("T")

TEXT_FIELDS = ("title", "name", "label", "text")

WeightsLike = ScoringWeights | Mapping[str, Any] | None


@runtime_checkable
class Searchable(Protocol):
    """Items that know their own display text and aliases."""

    def search_text(self) -> str: ...

    def search_keywords(self) -> Sequence[str]: ...


@dataclass
class SearchOptions(Generic[T]):
    """Per-call ranking options. Unset limits fall back to settings."""

    get_text: Callable[[T], str] | None = None
    get_keywords: Callable[[T], Sequence[str]] | None = None
    weights: WeightsLike = None
    limit: int = field(default_factory=lambda: config.settings.RESULT_LIMIT)
    min_score: float = field(default_factory=lambda: config.settings.MIN_SCORE)
    case_sensitive: bool = False
    max_text_length: int = field(default_factory=lambda: config.settings.MAX_TEXT_LENGTH)


@dataclass
class SearchResult(Generic[T]):
    """A ranked item."""

    item: T
    score: float  # 0-1, higher is better
    matched_text: str
    matched_keywords: list[str] = field(default_factory=list)


def _read(item: Any, key: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(key)
    return getattr(item, key, None)


def default_get_text(item: Any) -> str:
    """Display text: Searchable, str, or the first truthy title/name/label/text."""
    if isinstance(item, Searchable):
        return item.search_text()
    if isinstance(item, str):
        return item
    for key in TEXT_FIELDS:
        value = _read(item, key)
        if value:
            return str(value)
    if isinstance(item, Mapping):
        return json.dumps(item, default=str)
    return str(item)


def default_get_keywords(item: Any) -> list[str]:
    """Aliases from Searchable, or keywords/alias/aliases fields."""
    if isinstance(item, Searchable):
        return [str(k) for k in item.search_keywords()]
    if item is None or isinstance(item, (str, bytes, int, float)):
        return []

    keywords: list[str] = []
    values = _read(item, "keywords")
    if isinstance(values, (list, tuple)):
        keywords.extend(str(v) for v in values)
    alias = _read(item, "alias")
    if isinstance(alias, str):
        keywords.append(alias)
    values = _read(item, "aliases")
    if isinstance(values, (list, tuple)):
        keywords.extend(str(v) for v in values)
    return keywords


def score_match(
    text: str,
    query: str,
    keywords: Sequence[str] = (),
    weights: WeightsLike = None,
    max_text_length: int = 0,
) -> float:
    """
    Score text (plus its keywords) against a query.

    Args:
        text: Primary text
        query: Search query
        keywords: Alias strings appended to the searchable text
        weights: Partial overrides merged over the default weights
        max_text_length: Truncate the searchable text (0 disables)

    Returns:
        Score in [0, 1]; 0 for a blank query or blank text
    """
    if not query.strip() or not text.strip():
        return 0.0

    searchable = f"{text} {' '.join(keywords)}" if keywords else text
    if max_text_length and len(searchable) > max_text_length:
        searchable = searchable[:max_text_length]

    scorer = FuzzyScorer(weights)
    return scorer.score(
        searchable,
        query,
        normalize_text(searchable),
        normalize_text(query),
    )


def search_items(
    items: Iterable[T],
    query: str,
    options: SearchOptions[T] | None = None,
) -> list[SearchResult[T]]:
    """
    Rank items by fuzzy match against the query.

    Items scoring below options.min_score are dropped. Each result lists the
    keywords that match the query on their own.

    Args:
        items: Items to rank
        query: Search query
        options: Extractors, weights and limits

    Returns:
        Results sorted by descending score, at most options.limit long
    """
    if not query.strip():
        return []

    options = options or SearchOptions()
    get_text = options.get_text or default_get_text
    get_keywords = options.get_keywords or default_get_keywords
    weights = ScoringWeights.resolve(options.weights)
    case_sensitive = options.case_sensitive

    search_query = query if case_sensitive else fold_case(query)

    results: list[SearchResult[T]] = []
    total = 0
    for item in items:
        total += 1
        try:
            text = get_text(item)
            keywords = list(get_keywords(item))
        except Exception as e:
            logger.error(f"Failed to extract searchable text from {item!r}: {e}", exc_info=True)
            raise

        if not text:
            continue

        if not case_sensitive:
            search_text = fold_case(text)
            search_keywords = [fold_case(k) for k in keywords]
        else:
            search_text = text
            search_keywords = keywords

        # Keywords keep their case here, so matched capitals cost the case penalty
        score = score_match(
            search_text,
            search_query,
            keywords,
            weights,
            max_text_length=options.max_text_length,
        )
        if score < options.min_score:
            continue

        results.append(
            SearchResult(
                item=item,
                score=score,
                matched_text=text,
                matched_keywords=[
                    keyword
                    for keyword, search_keyword in zip(keywords, search_keywords)
                    if score_match(search_keyword, search_query, (), weights) > 0
                ],
            )
        )

    results.sort(key=lambda r: r.score, reverse=True)
    ranked = results[: max(options.limit, 0)]
    logger.debug(
        f"Ranked {len(ranked)}/{total} items for query={query!r} "
        f"({len(results)} above min_score={options.min_score})"
    )
    return ranked
