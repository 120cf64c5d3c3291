"""
Time helpers for report consumers.

Report times are HH:MM:SS strings. Charts and the audio player need seconds,
so these helpers convert in both directions and derive talk-time figures from
transcript segments.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from .schemas import TalkTime, Transcript, TranscriptSegment

_PART_RE = re.compile(r"^[0-9]+$")

# Two-digit hour field
MAX_DURATION_SECONDS = 99 * 3600 + 59 * 60 + 59


def parse_duration(ts: str) -> int:
	"""Convert "HH:MM:SS" (or "MM:SS") to whole seconds.

	Raises ValueError for anything else, including minute/second fields above 59.
	"""
	parts = ts.split(":") if isinstance(ts, str) else []
	if len(parts) not in (2, 3) or not all(_PART_RE.match(p) for p in parts):
		raise ValueError(f"Not a HH:MM:SS or MM:SS time: {ts!r}")
	numbers = [int(p) for p in parts]
	if len(numbers) == 3:
		hours, minutes, seconds = numbers
		if minutes > 59:
			raise ValueError(f"Minutes out of range in {ts!r}")
	else:
		hours = 0
		minutes, seconds = numbers
	if seconds > 59:
		raise ValueError(f"Seconds out of range in {ts!r}")
	return hours * 3600 + minutes * 60 + seconds


def format_duration(seconds: float) -> str:
	"""Format a non-negative number of seconds as a zero-padded "HH:MM:SS".

	Fractions are dropped. Values that do not fit a two-digit hour field raise
	ValueError, as do negative and non-finite values.
	"""
	if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
		raise ValueError(f"Seconds must be a number, got {seconds!r}")
	if not math.isfinite(seconds) or seconds < 0:
		raise ValueError(f"Seconds must be finite and non-negative, got {seconds!r}")
	total = int(seconds)
	if total > MAX_DURATION_SECONDS:
		raise ValueError(f"{seconds!r} seconds does not fit in HH:MM:SS")
	hours, rest = divmod(total, 3600)
	minutes, secs = divmod(rest, 60)
	return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def is_time_in_segment(current_time: float, start_time: str, end_time: str) -> bool:
	"""True when a playback position (seconds) falls inside [start_time, end_time]."""
	return parse_duration(start_time) <= current_time <= parse_duration(end_time)


def find_active_segment_index(current_time: float, segments: Sequence[Any]) -> int:
	"""Index of the first segment containing the playback position, or -1."""
	for index, segment in enumerate(segments):
		if is_time_in_segment(current_time, segment.start_time, segment.end_time):
			return index
	return -1


def compute_talk_time(segments: Sequence[TranscriptSegment], duration: Optional[int] = None) -> TalkTime:
	"""Derive talk-time metrics from transcript segments.

	`duration` defaults to the latest segment end. Idle time is the part of the
	session where nobody speaks; overlap is the part where two or more
	speakers talk at once.
	"""
	spans = []
	per_speaker: Dict[str, int] = {}
	for segment in segments:
		start = parse_duration(segment.start_time)
		end = parse_duration(segment.end_time)
		length = max(0, end - start)
		per_speaker[segment.speaker] = per_speaker.get(segment.speaker, 0) + length
		if length:
			spans.append((start, end))

	total = duration if duration is not None else max((end for _, end in spans), default=0)

	# Sweep over start/end events counting active speakers
	events = sorted([(start, 1) for start, _ in spans] + [(end, -1) for _, end in spans])
	covered = 0
	overlap = 0
	active = 0
	previous = 0
	for at, delta in events:
		if active >= 1:
			covered += at - previous
		if active >= 2:
			overlap += at - previous
		active += delta
		previous = at

	return TalkTime(
		duration=format_duration(total),
		speakers={speaker: format_duration(seconds) for speaker, seconds in per_speaker.items()},
		idle=format_duration(max(0, total - covered)),
		overlap=format_duration(overlap),
	)


@dataclass(frozen=True)
class TalkTimeShare:
	speaker_id: str
	label: str
	seconds: int
	percentage: float


def talk_time_breakdown(transcript: Transcript) -> List[TalkTimeShare]:
	"""Per-speaker share of the session, plus an "idle" entry when idle time exists.

	Percentages are relative to talk_time.duration and rounded to one decimal.
	Speakers missing from the speaker map are labelled with their id.
	"""
	talk_time = transcript.talk_time
	names = {entry.speaker_id: entry.speaker_name for entry in transcript.speaker_map}
	total = parse_duration(talk_time.duration)

	def _share(seconds: int) -> float:
		return round(seconds / total * 100, 1) if total > 0 else 0.0

	shares = []
	for speaker_id, value in talk_time.speakers.items():
		seconds = parse_duration(value)
		shares.append(TalkTimeShare(speaker_id, names.get(speaker_id, speaker_id), seconds, _share(seconds)))

	idle = parse_duration(talk_time.idle)
	if idle > 0:
		shares.append(TalkTimeShare("idle", "Idle Time", idle, _share(idle)))
	return shares
