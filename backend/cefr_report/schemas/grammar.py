"""Grammar schemas: accuracy, self-correction and syntactic complexity."""

from __future__ import annotations

from typing import Literal, Tuple

from pydantic import Field

from .base import (
	MAX_SEGMENTS,
	BaseScore,
	FeedbackSegment,
	PercentValue,
	PerHundredWordsValue,
	ReportModel,
	ScorePointsValue,
	vocabulary_tag,
)


GRAMMAR_TAGS = (
	"Verb Tense",
	"Subject-Verb Agreement",
	"Article Usage",
	"Preposition Error",
	"Word Order",
	"Singular/Plural",
	"Pronoun Usage",
	"Modal Verb Error",
	"Conditional Structure",
	"Relative Clause",
	"Passive Voice",
	"Mixed Errors",
)

GrammarTag = vocabulary_tag(GRAMMAR_TAGS, "grammar")


class GrammarSegment(FeedbackSegment):
	tags: Tuple[GrammarTag, ...]


class ErrorsPer100Words(ReportModel):
	name: str
	user_score: PerHundredWordsValue
	target_score: PerHundredWordsValue
	interpretation: Literal[
		"highly inaccurate",
		"frequent errors",
		"noticeable errors",
		"generally accurate",
		"accurate with minor errors",
		"highly accurate",
	]


class SelfCorrectionRate(ReportModel):
	name: str
	user_score: PercentValue
	target_score: PercentValue


class SyntacticComplexity(ReportModel):
	name: str
	user_score: ScorePointsValue
	target_score: ScorePointsValue
	interpretation: Literal[
		"very basic structures",
		"simple structures",
		"predictable patterns",
		"varied structures",
		"complex structures",
		"sophisticated structures",
	]


class ExampleError(ReportModel):
	error_type: str
	incorrect: str
	correct: str
	context: str = Field(description="Sentence or phrase containing the error")


class ErrorImpact(ReportModel):
	name: str
	dominant_error_type: Literal[
		"verb tense",
		"subject-verb agreement",
		"article usage",
		"preposition errors",
		"word order",
		"plural/singular forms",
		"pronoun usage",
		"modal verbs",
		"conditional structures",
		"relative clauses",
		"passive voice",
		"mixed errors",
	]
	impact_level: Literal[
		"severely impairs meaning",
		"frequently impairs meaning",
		"occasionally impairs meaning",
		"rarely impairs meaning",
		"does not impair meaning",
		"negligible impact",
	]
	example_errors: Tuple[ExampleError, ...]


class GrammarMetrics(ReportModel):
	errors_per_100_words: ErrorsPer100Words
	self_correction_rate: SelfCorrectionRate
	syntactic_complexity: SyntacticComplexity
	error_impact: ErrorImpact


class GrammarReport(ReportModel):
	type: Literal["grammar"]
	segments: Tuple[GrammarSegment, ...] = Field(max_length=MAX_SEGMENTS)
	metrics: GrammarMetrics
	score: BaseScore
