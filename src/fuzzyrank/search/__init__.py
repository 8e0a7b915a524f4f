"""Fuzzy Search Engine."""

from fuzzyrank.search.highlight import (
    HighlightSegment,
    HighlightedText,
    highlight_match,
    render_highlight,
)
from fuzzyrank.search.ranking import (
    Searchable,
    SearchOptions,
    SearchResult,
    score_match,
    search_items,
)
from fuzzyrank.search.schema import ColumnSchema, TableSchema, filter_schema
from fuzzyrank.search.scoring import Alignment, FuzzyScorer
from fuzzyrank.search.weights import ScoringWeights

__all__ = [
    "Alignment",
    "ColumnSchema",
    "FuzzyScorer",
    "HighlightSegment",
    "HighlightedText",
    "ScoringWeights",
    "Searchable",
    "SearchOptions",
    "SearchResult",
    "TableSchema",
    "filter_schema",
    "highlight_match",
    "render_highlight",
    "score_match",
    "search_items",
]
