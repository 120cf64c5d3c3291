"""Pronunciation schemas: segmental accuracy, stress, intonation, intelligibility."""

from __future__ import annotations

from typing import Literal, Tuple

from pydantic import Field

from .base import (
	MAX_SEGMENTS,
	BaseScore,
	FeedbackSegment,
	Number,
	PerHundredWordsValue,
	ReportModel,
	ScorePointsValue,
	vocabulary_tag,
)


PRONUNCIATION_TAGS = (
	"Segmental Error (Vowel)",
	"Segmental Error (Consonant)",
	"Word Stress Error",
	"Sentence Stress Error",
	"Intonation Error (Meaning)",
	"Rhythm/Syllable Timing",
	"Linking/Elision Issue",
)

PronunciationTag = vocabulary_tag(PRONUNCIATION_TAGS, "pronunciation")


class PronunciationSegment(FeedbackSegment):
	tags: Tuple[PronunciationTag, ...]


class ProblematicPhoneme(ReportModel):
	phoneme: str = Field(description="IPA notation, e.g. /θ/")
	accuracy: Number
	examples: Tuple[str, ...]


class SegmentalAccuracy(ReportModel):
	name: str
	user_score: ScorePointsValue
	target_score: ScorePointsValue
	error_rate: Number
	problematic_phonemes: Tuple[ProblematicPhoneme, ...]


class WordStressAccuracy(ReportModel):
	name: str
	user_score: PerHundredWordsValue
	target_score: PerHundredWordsValue


class IntonationControl(ReportModel):
	name: str
	deviation_level: Literal["low", "medium", "high"]
	meaning_variation: Literal["limited", "functional", "effective"]
	sentence_stress_error_rate: Number


class Intelligibility(ReportModel):
	name: str
	listener_strain: Literal["none", "minimal", "noticeable", "significant", "severe"]
	overall_impact: Literal[
		"fully intelligible",
		"clearly intelligible",
		"generally intelligible",
		"often unintelligible",
	]


class PronunciationMetrics(ReportModel):
	segmental_accuracy: SegmentalAccuracy
	word_stress_accuracy: WordStressAccuracy
	intonation_control: IntonationControl
	intelligibility: Intelligibility


class PronunciationReport(ReportModel):
	type: Literal["pronunciation"]
	segments: Tuple[PronunciationSegment, ...] = Field(max_length=MAX_SEGMENTS)
	metrics: PronunciationMetrics
	score: BaseScore
