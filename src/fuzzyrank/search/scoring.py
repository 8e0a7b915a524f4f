"""
Fuzzy Alignment Scoring

Scores how well a query aligns, character by character and in order, with a
candidate text. Every occurrence of each query character is tried, so a
repeated letter early in the text cannot hide a better alignment later on.

Score of a state (text_index, query_index) = best over match positions p of

    score(p + 1, query_index + 1) * bonus(p) * case_penalty

where bonus(p) is, from best to worst:
- consecutive with the previous match (p == text_index)
- right after a special character (`_`, `/`, `.` ...)
- right after a space or hyphen
- inside a word

States are filled bottom-up into a flat table indexed
`text_index * (query_len + 1) + query_index`, so the cost is bounded by
O(|text|^2 * |query|) with no recursion.
"""

from bisect import bisect_left
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from fuzzyrank.core.text import is_special_char, is_word_boundary, normalize_text
from fuzzyrank.search.weights import ScoringWeights


@dataclass
class Alignment:
    """Best score and the text positions that produced it."""

    score: float
    positions: list[int] = field(default_factory=list)


class FuzzyScorer:
    """
    Table-driven fuzzy matcher.

    Holds only immutable weights; every call allocates its own table, so
    one instance can be shared freely between threads.
    """

    def __init__(self, weights: ScoringWeights | Mapping[str, Any] | None = None):
        self.weights = ScoringWeights.resolve(weights)

    def score(
        self,
        text: str,
        query: str,
        normalized_text: str | None = None,
        normalized_query: str | None = None,
    ) -> float:
        """
        Score query against text.

        Args:
            text: Original text (case and boundary characters intact)
            query: Original query
            normalized_text: Precomputed normalize_text(text), if available
            normalized_query: Precomputed normalize_text(query), if available

        Returns:
            Score in [0, 1]; 0 when any query character cannot be placed
        """
        if not text or not query:
            return 0.0
        table, _ = self._fill(
            text,
            query,
            normalized_text if normalized_text is not None else normalize_text(text),
            normalized_query if normalized_query is not None else normalize_text(query),
            record=False,
        )
        return table[0]

    def align(self, text: str, query: str) -> Alignment:
        """Score query against text and recover the winning match positions."""
        if not text or not query:
            return Alignment(score=0.0)

        width = len(query) + 1
        table, choices = self._fill(
            text, query, normalize_text(text), normalize_text(query), record=True
        )

        positions: list[int] = []
        text_index = query_index = 0
        while query_index < len(query):
            choice = choices[text_index * width + query_index]
            if choice < 0:
                break
            position = choice // 2
            positions.append(position)
            text_index = position + 1
            # Odd choices mark a transposition step over two query characters
            query_index += 2 if choice % 2 else 1

        return Alignment(score=table[0], positions=positions)

    def _fill(
        self,
        text: str,
        query: str,
        normalized_text: str,
        normalized_query: str,
        record: bool,
    ) -> tuple[list[float], list[int]]:
        w = self.weights
        text_len = len(text)
        query_len = len(query)
        width = query_len + 1

        table = [0.0] * ((text_len + 1) * width)
        choices = [-1] * len(table) if record else []

        # Query fully consumed
        for text_index in range(text_len + 1):
            table[text_index * width + query_len] = (
                w.perfect_match if text_index == text_len else w.incomplete_match
            )

        # specials[k] / boundaries[k]: count within text[:k]
        specials = [0] * (text_len + 1)
        boundaries = [0] * (text_len + 1)
        occurrences: dict[str, list[int]] = {}
        for position, char in enumerate(normalized_text):
            occurrences.setdefault(char, []).append(position)
            original = text[position]
            specials[position + 1] = specials[position] + is_special_char(original)
            boundaries[position + 1] = boundaries[position] + is_word_boundary(original)

        for query_index in range(query_len - 1, -1, -1):
            query_char = normalized_query[query_index]
            candidates = occurrences.get(query_char, [])
            if not candidates:
                continue

            next_char = (
                normalized_query[query_index + 1] if query_index + 1 < query_len else None
            )
            doubled = next_char == query_char

            for text_index in range(text_len - 1, -1, -1):
                best = 0.0
                best_choice = -1

                for position in candidates[bisect_left(candidates, text_index) :]:
                    score = table[(position + 1) * width + query_index + 1]
                    step = 1

                    # Bonuses only shrink a score; skip them when it cannot win
                    if score > best:
                        score *= self._position_bonus(
                            text, text_index, position, specials, boundaries
                        )
                        if text[position] != query[query_index]:
                            score *= w.case_mismatch_penalty

                    # Swapped or doubled letters: consume two query characters
                    if next_char is not None:
                        previous = normalized_text[position - 1] if position > 0 else ""
                        if (score < w.min_score_threshold and previous == next_char) or (
                            doubled and previous != query_char
                        ):
                            transposed = (
                                table[(position + 1) * width + query_index + 2]
                                * w.min_score_threshold
                            )
                            if transposed > score:
                                score = transposed
                                step = 2

                    if score > best:
                        best = score
                        best_choice = position * 2 + step - 1

                table[text_index * width + query_index] = best
                if record:
                    choices[text_index * width + query_index] = best_choice

        return table, choices

    def _position_bonus(
        self,
        text: str,
        text_index: int,
        position: int,
        specials: list[int],
        boundaries: list[int],
    ) -> float:
        w = self.weights
        if position == text_index:
            return w.perfect_match

        # Skipped separators are counted in text[text_index:position - 1]
        previous = text[position - 1]
        if is_special_char(previous):
            bonus = w.special_char_boundary
            if text_index > 0:
                bonus *= w.gap_penalty ** (specials[position - 1] - specials[text_index])
            return bonus

        if is_word_boundary(previous):
            bonus = w.word_boundary
            if text_index > 0:
                bonus *= w.gap_penalty ** (boundaries[position - 1] - boundaries[text_index])
            return bonus

        bonus = w.middle_match
        if text_index > 0:
            bonus *= w.gap_penalty ** (position - text_index)
        return bonus
