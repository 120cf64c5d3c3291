"""
Evaluation Report Schemas
=========================

Single source of truth for the shape of an evaluation report. The models are
used for:

- runtime validation of analysis engine output (see cefr_report.validation)
- typed, immutable access for rendering code
- JSON Schema documents that can be embedded in analysis prompts
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import TypeAdapter

from .analysis import (
	EMOTIONS,
	SAFETY_CATEGORIES,
	Analysis,
	EmotionEvent,
	SafetyFlags,
	SpeakerSentiment,
	TopicSegment,
)
from .base import (
	MAX_SEGMENTS,
	MAX_SUGGESTIONS,
	MIN_SUGGESTIONS,
	SPEAKER_ID_PATTERN,
	TIMESTAMP_PATTERN,
	BaseScore,
	ConfidenceLevel,
	FeedbackSegment,
	ReportModel,
	Score,
	SpeakerId,
	Timestamp,
)
from .clarity import CLARITY_TAGS, ClarityMetrics, ClarityReport, ClaritySegment
from .fluency import FLUENCY_TAGS, FluencyMetrics, FluencyReport, FluencySegment
from .grammar import GRAMMAR_TAGS, GrammarMetrics, GrammarReport, GrammarSegment
from .pronunciation import PRONUNCIATION_TAGS, PronunciationMetrics, PronunciationReport, PronunciationSegment
from .summary import DimensionScores, Summary
from .transcript import SpeakerMapEntry, TalkTime, Transcript, TranscriptResponse, TranscriptSegment
from .vocabulary import VOCABULARY_TAGS, VocabularyMetrics, VocabularyReport, VocabularySegment
from .webhook import (
	PAYLOAD_VARIANTS,
	CEFRReports,
	CompletedPayload,
	FailedPayload,
	Reports,
	V2EvaluationData,
	WebhookPayload,
)


# Top-level documents published as JSON Schema
SCHEMAS: Dict[str, Any] = {
	"transcript": Transcript,
	"transcript_response": TranscriptResponse,
	"analysis": Analysis,
	"fluency": FluencyReport,
	"grammar": GrammarReport,
	"vocabulary": VocabularyReport,
	"pronunciation": PronunciationReport,
	"clarity": ClarityReport,
	"summary": Summary,
	"evaluation": V2EvaluationData,
	"webhook_payload": WebhookPayload,
}

SCHEMA_NAMES = tuple(SCHEMAS)


def json_schema(name: str) -> Dict[str, Any]:
	"""Return the JSON Schema document for one of SCHEMA_NAMES.

	Raises KeyError for an unknown name.
	"""
	return TypeAdapter(SCHEMAS[name]).json_schema()


__all__ = [
	"Analysis",
	"BaseScore",
	"CEFRReports",
	"CLARITY_TAGS",
	"ClarityMetrics",
	"ClarityReport",
	"ClaritySegment",
	"CompletedPayload",
	"ConfidenceLevel",
	"DimensionScores",
	"EMOTIONS",
	"EmotionEvent",
	"FLUENCY_TAGS",
	"FailedPayload",
	"FeedbackSegment",
	"FluencyMetrics",
	"FluencyReport",
	"FluencySegment",
	"GRAMMAR_TAGS",
	"GrammarMetrics",
	"GrammarReport",
	"GrammarSegment",
	"MAX_SEGMENTS",
	"MAX_SUGGESTIONS",
	"MIN_SUGGESTIONS",
	"PAYLOAD_VARIANTS",
	"PRONUNCIATION_TAGS",
	"PronunciationMetrics",
	"PronunciationReport",
	"PronunciationSegment",
	"ReportModel",
	"Reports",
	"SAFETY_CATEGORIES",
	"SCHEMAS",
	"SCHEMA_NAMES",
	"SPEAKER_ID_PATTERN",
	"SafetyFlags",
	"Score",
	"SpeakerId",
	"SpeakerMapEntry",
	"SpeakerSentiment",
	"Summary",
	"TIMESTAMP_PATTERN",
	"TalkTime",
	"Timestamp",
	"TopicSegment",
	"Transcript",
	"TranscriptResponse",
	"TranscriptSegment",
	"V2EvaluationData",
	"VOCABULARY_TAGS",
	"VocabularyMetrics",
	"VocabularyReport",
	"VocabularySegment",
	"WebhookPayload",
	"json_schema",
]
