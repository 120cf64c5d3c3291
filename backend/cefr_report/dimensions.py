"""
CEFR Dimension Registry
=======================

The five assessed dimensions form a closed set. Each one is described by a
DimensionSpec bundling its tag vocabulary with its segment, metrics and
report models, so callers can look a dimension up by name instead of
importing five modules.

`validate_dimension` is the per-dimension validation entry point. It checks
the `type` discriminator first; a missing or mismatched discriminator is a
structural failure and nothing else is reported for that input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Any, Dict, Mapping, Tuple, Type, Union

from pydantic import Field

from .schemas import (
	CLARITY_TAGS,
	FLUENCY_TAGS,
	GRAMMAR_TAGS,
	PRONUNCIATION_TAGS,
	VOCABULARY_TAGS,
	ClarityMetrics,
	ClarityReport,
	ClaritySegment,
	FluencyMetrics,
	FluencyReport,
	FluencySegment,
	GrammarMetrics,
	GrammarReport,
	GrammarSegment,
	PronunciationMetrics,
	PronunciationReport,
	PronunciationSegment,
	ReportModel,
	VocabularyMetrics,
	VocabularyReport,
	VocabularySegment,
)
from .validation import ValidationFailure, ValidationSuccess, Violation, ViolationKind, validate_model


@dataclass(frozen=True)
class DimensionSpec:
	name: str
	label: str
	tags: Tuple[str, ...]
	segment_model: Type[ReportModel]
	metrics_model: Type[ReportModel]
	report_model: Type[ReportModel]


DIMENSIONS: Dict[str, DimensionSpec] = {
	spec.name: spec
	for spec in (
		DimensionSpec("fluency", "Fluency", FLUENCY_TAGS, FluencySegment, FluencyMetrics, FluencyReport),
		DimensionSpec("grammar", "Grammar", GRAMMAR_TAGS, GrammarSegment, GrammarMetrics, GrammarReport),
		DimensionSpec("vocabulary", "Vocabulary", VOCABULARY_TAGS, VocabularySegment, VocabularyMetrics, VocabularyReport),
		DimensionSpec(
			"pronunciation",
			"Pronunciation",
			PRONUNCIATION_TAGS,
			PronunciationSegment,
			PronunciationMetrics,
			PronunciationReport,
		),
		DimensionSpec("clarity", "Clarity", CLARITY_TAGS, ClaritySegment, ClarityMetrics, ClarityReport),
	)
}

DIMENSION_NAMES = tuple(DIMENSIONS)

# Any single dimension report, discriminated on `type`
DimensionReport = Annotated[
	Union[FluencyReport, GrammarReport, VocabularyReport, PronunciationReport, ClarityReport],
	Field(discriminator="type"),
]


def get_dimension(name: str) -> DimensionSpec:
	try:
		return DIMENSIONS[name]
	except KeyError:
		raise KeyError(f"Unknown dimension {name!r}; expected one of {', '.join(DIMENSION_NAMES)}") from None


def tags_for(name: str) -> Tuple[str, ...]:
	"""Read-only tag vocabulary of a dimension, in display order."""
	return get_dimension(name).tags


def validate_dimension(name: str, raw: Any) -> Union[ValidationSuccess, ValidationFailure]:
	"""Validate one dimension report (e.g. the `grammar` block) on its own.

	On success `result.value` is the typed report model for that dimension.
	"""
	spec = get_dimension(name)
	if isinstance(raw, Mapping):
		if "type" not in raw:
			return ValidationFailure(violations=[
				Violation(
					path="type",
					kind=ViolationKind.STRUCTURAL,
					message=f"Field required: expected discriminator '{spec.name}'",
				)
			])
		if raw["type"] != spec.name:
			return ValidationFailure(violations=[
				Violation.describe(
					"type",
					ViolationKind.STRUCTURAL,
					f"Expected report type '{spec.name}'",
					raw["type"],
				)
			])
		raw = dict(raw)
	return validate_model(spec.report_model, raw)
