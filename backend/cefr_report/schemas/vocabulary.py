"""Vocabulary schemas: lexical range, sophistication and precision."""

from __future__ import annotations

from typing import Literal, Tuple

from pydantic import Field

from .base import (
	MAX_SEGMENTS,
	BaseScore,
	FeedbackSegment,
	Number,
	PercentValue,
	PerHundredWordsValue,
	RatioValue,
	ReportModel,
	vocabulary_tag,
)


VOCABULARY_TAGS = (
	"Inaccurate Collocation",
	"Word Choice Error",
	"Lexical Gap (Circumlocution)",
	"Misused Phrasal Verb",
	"Formal/Informal Mismatch",
	"Overuse of Vague Language",
	"Semantic Misuse",
	"False Friend",
)

VocabularyTag = vocabulary_tag(VOCABULARY_TAGS, "vocabulary")


class VocabularySegment(FeedbackSegment):
	tags: Tuple[VocabularyTag, ...]


class LexicalDiversity(ReportModel):
	name: str
	user_score: RatioValue
	target_score: RatioValue
	unique_words_count: Number
	total_words_count: Number


class LevelBreakdown(ReportModel):
	percentage: Number
	words: Tuple[str, ...] = Field(description="Lemmatized words used at this level")


class CEFRBreakdown(ReportModel):
	A1: LevelBreakdown
	A2: LevelBreakdown
	B1: LevelBreakdown
	B2: LevelBreakdown
	C1: LevelBreakdown
	C2: LevelBreakdown


class LexicalDistribution(ReportModel):
	name: str
	average_lexical_level: Number
	interpretation: Literal[
		"very basic vocabulary",
		"elementary vocabulary",
		"adequate for general topics",
		"good range for complex topics",
		"sophisticated vocabulary",
		"highly advanced vocabulary",
	]
	cefr_breakdown: CEFRBreakdown


class LexicalSophistication(ReportModel):
	name: str
	user_score: PercentValue
	target_score: PercentValue
	interpretation: Literal[
		"restricted to basic needs",
		"adequate for simple transactions",
		"sufficient for general topics",
		"broad and flexible for general topics",
		"good range for complex topics",
		"extensive and specialized",
	]


class PrecisionError(ReportModel):
	error_type: str
	incorrect: str
	correct: str


class LexicalPrecision(ReportModel):
	name: str
	user_score: PerHundredWordsValue
	target_score: PerHundredWordsValue
	precision_level: Literal[
		"frequent basic misuse",
		"noticeable misuse of complex terms",
		"generally accurate with minor lapses",
		"accurate with rare slips",
		"highly precise",
	]
	error_examples: Tuple[PrecisionError, ...]


class VocabularyMetrics(ReportModel):
	lexical_diversity: LexicalDiversity
	lexical_distribution: LexicalDistribution
	lexical_sophistication: LexicalSophistication
	lexical_precision: LexicalPrecision


class VocabularyReport(ReportModel):
	type: Literal["vocabulary"]
	segments: Tuple[VocabularySegment, ...] = Field(max_length=MAX_SEGMENTS)
	metrics: VocabularyMetrics
	score: BaseScore
