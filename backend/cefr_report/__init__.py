"""Validation and data-modeling layer for CEFR evaluation reports."""

from .consistency import ConsistencyWarning, check_consistency
from .dimensions import DIMENSION_NAMES, DIMENSIONS, DimensionSpec, get_dimension, tags_for, validate_dimension
from .durations import (
	compute_talk_time,
	find_active_segment_index,
	format_duration,
	is_time_in_segment,
	parse_duration,
	talk_time_breakdown,
)
from .schemas import (
	CLARITY_TAGS,
	FLUENCY_TAGS,
	GRAMMAR_TAGS,
	PRONUNCIATION_TAGS,
	SCHEMA_NAMES,
	VOCABULARY_TAGS,
	V2EvaluationData,
	json_schema,
)
from .validation import (
	ValidationFailure,
	ValidationSuccess,
	Violation,
	ViolationKind,
	validate_model,
	validate_payload,
	validate_report,
)

__all__ = [
	"CLARITY_TAGS",
	"ConsistencyWarning",
	"DIMENSIONS",
	"DIMENSION_NAMES",
	"DimensionSpec",
	"FLUENCY_TAGS",
	"GRAMMAR_TAGS",
	"PRONUNCIATION_TAGS",
	"SCHEMA_NAMES",
	"V2EvaluationData",
	"VOCABULARY_TAGS",
	"ValidationFailure",
	"ValidationSuccess",
	"Violation",
	"ViolationKind",
	"check_consistency",
	"compute_talk_time",
	"find_active_segment_index",
	"format_duration",
	"get_dimension",
	"is_time_in_segment",
	"json_schema",
	"parse_duration",
	"tags_for",
	"talk_time_breakdown",
	"validate_dimension",
	"validate_model",
	"validate_payload",
	"validate_report",
]
