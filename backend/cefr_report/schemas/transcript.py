"""Transcript schemas: speaker-segmented dialogue with talk-time metrics."""

from __future__ import annotations

from types import MappingProxyType
from typing import Annotated, Dict, Mapping, Tuple

from pydantic import AfterValidator, PlainSerializer

from .base import ReportModel, SpeakerId, Timestamp


def _read_only(speakers: Dict[str, str]) -> Mapping[str, str]:
	return MappingProxyType(speakers)


def _as_dict(speakers: Mapping[str, str]) -> Dict[str, str]:
	return dict(speakers)


# Read-only after validation; serialized back to a plain object
SpeakerTalkTime = Annotated[
	Dict[str, Timestamp],
	AfterValidator(_read_only),
	PlainSerializer(_as_dict, return_type=Dict[str, str]),
]


class TranscriptSegment(ReportModel):
	speaker: SpeakerId
	start_time: Timestamp
	end_time: Timestamp
	content: str


class SpeakerMapEntry(ReportModel):
	"""Maps a diarized speaker id to the speaker's display name or role."""
	speaker_id: SpeakerId
	speaker_name: str


class TalkTime(ReportModel):
	"""Talk time computed after transcription; every value is an HH:MM:SS string."""
	duration: Timestamp
	speakers: SpeakerTalkTime
	idle: Timestamp
	overlap: Timestamp


class RawTranscript(ReportModel):
	segments: Tuple[TranscriptSegment, ...]
	speaker_map: Tuple[SpeakerMapEntry, ...]


class TranscriptResponse(ReportModel):
	"""Transcript exactly as the analysis engine returns it, before talk time is added."""
	transcript: RawTranscript


class Transcript(ReportModel):
	segments: Tuple[TranscriptSegment, ...]
	speaker_map: Tuple[SpeakerMapEntry, ...]
	talk_time: TalkTime
