"""
Scoring Weights

Multiplicative coefficients for the fuzzy alignment scorer.
"""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)

logger = logging.getLogger(__name__)


class ScoringWeights(BaseModel):
    """
    Bonus and penalty multipliers, all in [0, 1].

    Values outside the range are clamped rather than rejected, which keeps
    every score the scorer can produce inside [0, 1].
    """

    model_config = ConfigDict(frozen=True, extra="ignore", allow_inf_nan=False)

    perfect_match: float = Field(default=1.0, description="Consecutive match")
    word_boundary: float = Field(default=0.9, description="Match after space or hyphen")
    special_char_boundary: float = Field(
        default=0.8, description="Match after a special character such as _ or ."
    )
    middle_match: float = Field(default=0.17, description="Match inside a word")
    incomplete_match: float = Field(
        default=0.99, description="Query consumed but text has trailing characters"
    )
    gap_penalty: float = Field(default=0.999, description="Per skipped character")
    case_mismatch_penalty: float = Field(
        default=0.9999, description="Matched character differs only in case"
    )
    min_score_threshold: float = Field(
        default=0.1, description="Below this a transposition recovery is attempted"
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_unknown(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            unknown = [key for key in data if key not in cls.model_fields]
            if unknown:
                logger.warning(f"Ignoring unknown scoring weights: {', '.join(map(str, unknown))}")
                data = {key: value for key, value in data.items() if key in cls.model_fields}
        return data

    @field_validator("*")
    @classmethod
    def _clamp(cls, value: float, info: ValidationInfo) -> float:
        clamped = min(max(value, 0.0), 1.0)
        if clamped != value:
            logger.warning(f"Clamped scoring weight {info.field_name}={value} to {clamped}")
        return clamped

    @classmethod
    def resolve(
        cls, overrides: "ScoringWeights | Mapping[str, Any] | None" = None
    ) -> "ScoringWeights":
        """
        Build the effective weights for a call.

        Args:
            overrides: None for defaults, a ScoringWeights instance, or a
                partial mapping merged over the defaults. Mapping keys may use
                either `middle_match` or `MIDDLE_MATCH` spelling.
        """
        if overrides is None:
            return DEFAULT_WEIGHTS
        if isinstance(overrides, ScoringWeights):
            return overrides
        if not overrides:
            return DEFAULT_WEIGHTS
        return cls(**{str(key).lower(): value for key, value in overrides.items()})


DEFAULT_WEIGHTS = ScoringWeights()
