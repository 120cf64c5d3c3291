"""
Shared Report Primitives
========================

Pattern, enum and numeric types used by every section of the evaluation
report, plus the building blocks the five CEFR dimensions compose:

- Timestamp / SpeakerId: pattern-matched strings
- ConfidenceLevel: low | medium | high
- Score: a real number in [0, 100], rejected (never clamped) when outside
- BaseScore: strengths, limitations, score, confidence and reason
- FeedbackSegment: the timestamped, tagged feedback point each dimension lists
- Measured values: {value, unit} pairs with a fixed unit literal per measure

Every model derives from ReportModel and is frozen once validated.
"""

from __future__ import annotations

from typing import Annotated, Literal, Sequence, Tuple

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StringConstraints, WithJsonSchema
from pydantic_core import PydanticCustomError


# ============================================================================
# PATTERNS AND SCALARS
# ============================================================================

TIMESTAMP_PATTERN = r"^[0-9]{2}:[0-5][0-9]:[0-5][0-9]$"
SPEAKER_ID_PATTERN = r"^SPEAKER_[0-9]{2}$"

SCORE_MIN = 0
SCORE_MAX = 100

# Feedback segments per dimension report
MAX_SEGMENTS = 10
MIN_SUGGESTIONS = 1
MAX_SUGGESTIONS = 3

Timestamp = Annotated[
	str,
	StringConstraints(pattern=TIMESTAMP_PATTERN),
	Field(description="Time in HH:MM:SS format."),
]

SpeakerId = Annotated[
	str,
	StringConstraints(pattern=SPEAKER_ID_PATTERN),
	Field(description="Diarized speaker identifier, e.g. SPEAKER_00."),
]

ConfidenceLevel = Literal["low", "medium", "high"]

# Strict numbers: "50", True and NaN are rejected rather than coerced
Number = Annotated[float, Field(strict=True, allow_inf_nan=False)]
NonNegativeNumber = Annotated[float, Field(strict=True, allow_inf_nan=False, ge=0)]
Score = Annotated[
	float,
	Field(strict=True, allow_inf_nan=False, ge=SCORE_MIN, le=SCORE_MAX, description="Score out of 100"),
]


def vocabulary_tag(vocabulary: Sequence[str], dimension: str):
	"""Build the tag type for one dimension's closed tag vocabulary.

	The returned annotation validates a string against `vocabulary` and names
	both the offending tag and the dimension on failure. The JSON Schema
	still publishes the vocabulary as a plain string enum.
	"""
	allowed = frozenset(vocabulary)

	def _check(tag: str) -> str:
		if tag not in allowed:
			raise PydanticCustomError(
				"unknown_tag",
				"'{tag}' is not in the {dimension} tag vocabulary ({count} tags)",
				{"tag": tag, "dimension": dimension, "count": len(allowed)},
			)
		return tag

	return Annotated[
		str,
		AfterValidator(_check),
		WithJsonSchema({"type": "string", "enum": list(vocabulary)}),
	]


# ============================================================================
# COMMON MODELS
# ============================================================================

class ReportModel(BaseModel):
	"""Base for every report entity.

	Instances are frozen once validated, and collections are held as tuples or
	read-only mappings, so nothing reachable from a report can be mutated.
	"""
	model_config = ConfigDict(frozen=True)


class BaseScore(ReportModel):
	"""Overall score block shared by all CEFR dimension assessments."""
	strengths: Tuple[str, ...] = Field(description="Observed strengths, most significant first")
	limitations: Tuple[str, ...] = Field(description="Observed limitations, most significant first")
	score: Score
	confidence_level: ConfidenceLevel = Field(description="Confidence in the assessment")
	reason: str = Field(description="Justification for the score, addressing the student")


class FeedbackSegment(ReportModel):
	"""Timestamped feedback point; each dimension adds its own `tags` field."""
	timestamp: Timestamp
	content: str = Field(description="The phrase or event that was flagged")
	suggestion: Tuple[str, ...] = Field(
		min_length=MIN_SUGGESTIONS,
		max_length=MAX_SUGGESTIONS,
		description="1-3 suggested alternatives",
	)
	explanation: str = Field(description="Why this segment was flagged")


# ============================================================================
# MEASURED VALUES
# ============================================================================

class SecondsValue(ReportModel):
	value: Number
	unit: Literal["seconds"]


class PerHundredWordsValue(ReportModel):
	value: Number
	unit: Literal["per 100 words"]


class PercentValue(ReportModel):
	value: Number
	unit: Literal["%"]


class ScorePointsValue(ReportModel):
	value: Number
	unit: Literal["score"]


class RatioValue(ReportModel):
	value: Number
	unit: Literal["ratio"]


class CountValue(ReportModel):
	value: Number
	unit: Literal["count"]


class FreeUnitValue(ReportModel):
	"""A measured value whose unit is chosen by the analysis engine (e.g. WPM)."""
	value: Number
	unit: str
