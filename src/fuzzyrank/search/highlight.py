"""
Match Highlighting

Splits a text into matched and unmatched segments for display.
"""

import html
from dataclasses import dataclass, field

from fuzzyrank.core.text import fold_case
from fuzzyrank.search.scoring import FuzzyScorer


@dataclass
class HighlightSegment:
    """A contiguous run of the original text."""

    text: str
    start: int
    end: int
    is_match: bool


@dataclass
class HighlightedText:
    """Original text plus segments that concatenate back to it."""

    text: str
    segments: list[HighlightSegment] = field(default_factory=list)

    @property
    def matched(self) -> str:
        """Matched characters, in order."""
        return "".join(s.text for s in self.segments if s.is_match)


def _segments_from_positions(text: str, positions: list[int]) -> list[HighlightSegment]:
    segments: list[HighlightSegment] = []
    cursor = 0
    for position in positions:
        if position > cursor:
            segments.append(HighlightSegment(text[cursor:position], cursor, position, False))
        segments.append(HighlightSegment(text[position], position, position + 1, True))
        cursor = position + 1
    if cursor < len(text):
        segments.append(HighlightSegment(text[cursor:], cursor, len(text), False))
    return segments


def _greedy_positions(text: str, query: str) -> list[int]:
    lower_text = fold_case(text)
    lower_query = fold_case(query)

    positions: list[int] = []
    cursor = 0
    for query_char in lower_query:
        if cursor >= len(text):
            break
        position = lower_text.find(query_char, cursor)
        if position == -1:
            break
        positions.append(position)
        cursor = position + 1
    return positions


def highlight_match(text: str, query: str, aligned: bool = False) -> HighlightedText:
    """
    Mark the characters of text that match query.

    Args:
        text: Display text
        query: Search query
        aligned: Use the scorer's best alignment instead of the first
            left-to-right occurrence of each query character

    Returns:
        HighlightedText whose segments reconstruct text exactly
    """
    if not query.strip() or not text.strip():
        return HighlightedText(
            text=text,
            segments=[HighlightSegment(text, 0, len(text), False)],
        )

    if aligned:
        positions = FuzzyScorer().align(text, query).positions
    else:
        positions = _greedy_positions(text, query)

    return HighlightedText(text=text, segments=_segments_from_positions(text, positions))


def render_highlight(highlighted: HighlightedText, tag: str = "mark") -> str:
    """
    Render segments as HTML, wrapping matched runs in <tag>.

    Adjacent matched characters share one tag.
    """
    parts: list[str] = []
    run: list[str] = []
    for segment in highlighted.segments:
        if segment.is_match:
            run.append(segment.text)
            continue
        if run:
            parts.append(f"<{tag}>{html.escape(''.join(run))}</{tag}>")
            run = []
        parts.append(html.escape(segment.text))
    if run:
        parts.append(f"<{tag}>{html.escape(''.join(run))}</{tag}>")
    return "".join(parts)
