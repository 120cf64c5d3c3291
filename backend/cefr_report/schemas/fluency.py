"""Fluency schemas: speech rate, pauses, fillers and hesitation."""

from __future__ import annotations

from typing import Literal, Tuple

from pydantic import Field, StrictBool, model_validator

from .base import (
	MAX_SEGMENTS,
	BaseScore,
	FeedbackSegment,
	FreeUnitValue,
	Number,
	PercentValue,
	PerHundredWordsValue,
	ReportModel,
	SecondsValue,
	vocabulary_tag,
)


FLUENCY_TAGS = (
	"Long Pause",
	"Filler Cluster",
	"Self-Correction",
	"Repetition",
	"Grammatical Error",
	"Accuracy",
	"Structural Error",
	"Clarity",
	"False Start",
	"Meta-Commentary",
	"Tense Error",
	"Retrieval Lag",
	"Redundancy",
	"Structural Breakdown",
	"High Effort",
	"Lexical Choice",
	"Incomplete Phrase",
	"Fragmentation",
	"Awkward Phrasing",
	"Vagueness",
)

FluencyTag = vocabulary_tag(FLUENCY_TAGS, "fluency")


class FluencySegment(FeedbackSegment):
	tags: Tuple[FluencyTag, ...]


class SpeechRate(ReportModel):
	name: str
	user_score: FreeUnitValue
	target_score: FreeUnitValue
	interpretation: Literal["slow", "functional", "near-B2 speed", "natural", "fast"]

	@model_validator(mode="after")
	def _units_agree(self) -> "SpeechRate":
		# The unit is free-form here, so agreement is the only thing to check
		if self.user_score.unit != self.target_score.unit:
			raise ValueError(
				f"user_score unit {self.user_score.unit!r} does not match target_score unit {self.target_score.unit!r}"
			)
		return self


class AveragePauseDuration(ReportModel):
	name: str
	user_score: SecondsValue
	target_score: SecondsValue
	threshold_exceeded: StrictBool


class FillerCount(ReportModel):
	filler: str
	count: Number


class FillersPer100Words(ReportModel):
	name: str
	user_score: PerHundredWordsValue
	target_score: PerHundredWordsValue
	level: Literal["none", "minimal", "low", "moderate", "high", "excessive"]
	breakdown: Tuple[FillerCount, ...]


class HesitationRate(ReportModel):
	name: str
	user_score: PercentValue
	target_score: PercentValue


class FluencyMetrics(ReportModel):
	speech_rate: SpeechRate
	average_pause_duration: AveragePauseDuration
	fillers_per_100_words: FillersPer100Words
	hesitation_rate: HesitationRate


class FluencyReport(ReportModel):
	type: Literal["fluency"]
	segments: Tuple[FluencySegment, ...] = Field(max_length=MAX_SEGMENTS)
	metrics: FluencyMetrics
	score: BaseScore
