"""Fuzzy text matching and ranking for search-as-you-type."""

from fuzzyrank.search import (
    Alignment,
    ColumnSchema,
    FuzzyScorer,
    HighlightSegment,
    HighlightedText,
    ScoringWeights,
    Searchable,
    SearchOptions,
    SearchResult,
    TableSchema,
    filter_schema,
    highlight_match,
    render_highlight,
    score_match,
    search_items,
)

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
