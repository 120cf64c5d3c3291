"""
Interaction analysis schemas: topic segmentation, safety flags, per-speaker
sentiment and the emotion timeline.

`SpeakerSentiment.dominant_emotion` is restricted to EMOTIONS while
`EmotionEvent.emotion` accepts any string. The asymmetry mirrors what the
analysis engine emits and is kept as-is.
"""

from __future__ import annotations

from typing import Literal, Optional, Tuple, get_args

from pydantic import StrictBool

from .base import Number, ReportModel, Timestamp


SafetyCategory = Literal[
	"profanity",
	"sexual_content",
	"violence",
	"hate_speech",
	"harassment",
	"self_harm",
	"discrimination",
	"bullying",
	"spam",
]

Emotion = Literal[
	"happy",
	"joyful",
	"excited",
	"enthusiastic",
	"content",
	"satisfied",
	"confident",
	"proud",
	"grateful",
	"hopeful",
	"amused",
	"pleased",
	"cheerful",
	"encouraging",
	"supportive",
	"optimistic",
	"relieved",
	"calm",
	"peaceful",
	"sad",
	"unhappy",
	"disappointed",
	"frustrated",
	"angry",
	"annoyed",
	"irritated",
	"anxious",
	"worried",
	"nervous",
	"fearful",
	"scared",
	"confused",
	"uncertain",
	"doubtful",
	"bored",
	"tired",
	"stressed",
	"overwhelmed",
	"embarrassed",
	"ashamed",
	"guilty",
	"jealous",
	"lonely",
	"hurt",
	"disgusted",
	"neutral",
	"indifferent",
	"curious",
	"inquisitive",
	"interested",
	"thoughtful",
	"focused",
	"attentive",
	"surprised",
	"shocked",
	"skeptical",
	"serious",
	"contemplative",
]


SAFETY_CATEGORIES = get_args(SafetyCategory)
EMOTIONS = get_args(Emotion)


class TopicSegment(ReportModel):
	topic: str
	start_time: Timestamp
	end_time: Timestamp


class SafetyFlags(ReportModel):
	profanity_detected: StrictBool
	flagged_words: Tuple[str, ...]
	flagged_categories: Optional[Tuple[SafetyCategory, ...]] = None


class SpeakerSentiment(ReportModel):
	speaker_id: str
	average_sentiment: Literal["positive", "negative", "neutral", "mixed"]
	dominant_emotion: Emotion
	sentiment_score: Optional[Number] = None


class EmotionEvent(ReportModel):
	speaker: str
	emotion: str
	timestamp: Timestamp
	intensity: Optional[Literal["low", "moderate", "high", "very_high"]] = None
	confidence: Optional[Number] = None


class Analysis(ReportModel):
	topic_segments: Tuple[TopicSegment, ...]
	safety_flags: SafetyFlags
	overall_sentiment: Tuple[SpeakerSentiment, ...]
	emotion_timeline: Tuple[EmotionEvent, ...]
