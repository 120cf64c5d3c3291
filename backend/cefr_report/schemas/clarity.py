"""Clarity schemas: cohesion, discourse organization and thematic continuity."""

from __future__ import annotations

from typing import Literal, Tuple

from pydantic import Field

from .base import (
	MAX_SEGMENTS,
	BaseScore,
	CountValue,
	FeedbackSegment,
	Number,
	PerHundredWordsValue,
	ReportModel,
	vocabulary_tag,
)


CLARITY_TAGS = (
	"Missing Connector",
	"Inappropriate Connector",
	"Unclear Reference",
	"Topic Drift",
	"Abrupt Transition",
	"Lack of Structure",
	"Repetitive Linking",
	"Logical Gap",
)

ClarityTag = vocabulary_tag(CLARITY_TAGS, "clarity")


class ClaritySegment(FeedbackSegment):
	tags: Tuple[ClarityTag, ...]


class CohesiveDevices(ReportModel):
	name: str
	user_score: PerHundredWordsValue
	target_score: PerHundredWordsValue
	variety_level: Literal["limited", "functional", "varied", "sophisticated"]
	misuse_rate: Number


class DiscourseOrganization(ReportModel):
	name: str
	user_score: CountValue
	target_score: CountValue
	structural_clarity: Literal["disjointed", "linear/basic", "well-structured", "lucid/articulate"]


class ThematicContinuity(ReportModel):
	name: str
	topic_drift_count: Number
	recovery_rate: Number


class ClarityMetrics(ReportModel):
	cohesive_devices: CohesiveDevices
	discourse_organization: DiscourseOrganization
	thematic_continuity: ThematicContinuity


class ClarityReport(ReportModel):
	type: Literal["clarity"]
	segments: Tuple[ClaritySegment, ...] = Field(max_length=MAX_SEGMENTS)
	metrics: ClarityMetrics
	score: BaseScore
