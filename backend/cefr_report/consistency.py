"""
Semantic consistency checks for a validated report.

Schema validation only guarantees shape, ranges and vocabularies. A report
can still disagree with itself: summary scores that drift from the dimension
scores, speakers that the speaker map never names, segments out of order.
check_consistency runs after validation and returns warnings; it never
rejects a report.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from .dimensions import DIMENSION_NAMES
from .durations import parse_duration
from .schemas import V2EvaluationData
from .schemas.summary import SUMMARY_HIGHLIGHTS
from .settings import settings

logger = logging.getLogger(__name__)


class ConsistencyWarning(BaseModel):
	model_config = ConfigDict(frozen=True)

	code: str
	path: str
	message: str


def _check_scores(report: V2EvaluationData, tolerance: float) -> List[ConsistencyWarning]:
	cefr = report.reports.cefr
	summary = cefr.summary
	warnings = []
	for name in DIMENSION_NAMES:
		summary_score = getattr(summary.dimension_scores, name)
		dimension_score = getattr(cefr, name).score.score
		if abs(summary_score - dimension_score) > tolerance:
			warnings.append(ConsistencyWarning(
				code="dimension_score_mismatch",
				path=f"reports.cefr.summary.dimension_scores.{name}",
				message=f"Summary lists {name} as {summary_score:g} but the {name} report scores {dimension_score:g}",
			))

	scores = [getattr(summary.dimension_scores, name) for name in DIMENSION_NAMES]
	average = sum(scores) / len(scores)
	if abs(summary.score.score - average) > tolerance:
		warnings.append(ConsistencyWarning(
			code="summary_average_mismatch",
			path="reports.cefr.summary.score.score",
			message=f"Overall score {summary.score.score:g} differs from the dimension average {average:.1f}",
		))

	for field in ("strengths", "limitations"):
		items = getattr(summary.score, field)
		if len(items) > SUMMARY_HIGHLIGHTS:
			warnings.append(ConsistencyWarning(
				code="too_many_highlights",
				path=f"reports.cefr.summary.score.{field}",
				message=f"{len(items)} {field} listed; the summary highlights at most {SUMMARY_HIGHLIGHTS}",
			))
	return warnings


def _check_spans(spans: Sequence, path: str) -> List[ConsistencyWarning]:
	"""Inverted and out-of-order start/end spans."""
	warnings = []
	previous_start = None
	for index, span in enumerate(spans):
		start = parse_duration(span.start_time)
		end = parse_duration(span.end_time)
		if end < start:
			warnings.append(ConsistencyWarning(
				code="inverted_span",
				path=f"{path}[{index}]",
				message=f"Ends at {span.end_time} before it starts at {span.start_time}",
			))
		if previous_start is not None and start < previous_start:
			warnings.append(ConsistencyWarning(
				code="out_of_order",
				path=f"{path}[{index}].start_time",
				message=f"Starts at {span.start_time}, earlier than the previous entry",
			))
		previous_start = start
	return warnings


def _check_speakers(report: V2EvaluationData) -> List[ConsistencyWarning]:
	transcript = report.transcript
	warnings = []
	known = set()
	for index, entry in enumerate(transcript.speaker_map):
		if entry.speaker_id in known:
			warnings.append(ConsistencyWarning(
				code="duplicate_speaker",
				path=f"transcript.speaker_map[{index}].speaker_id",
				message=f"{entry.speaker_id} is mapped more than once",
			))
		known.add(entry.speaker_id)

	reported = set()
	for index, segment in enumerate(transcript.segments):
		if segment.speaker not in known and segment.speaker not in reported:
			reported.add(segment.speaker)
			warnings.append(ConsistencyWarning(
				code="unknown_speaker",
				path=f"transcript.segments[{index}].speaker",
				message=f"{segment.speaker} does not appear in the speaker map",
			))

	for speaker_id in transcript.talk_time.speakers:
		if speaker_id not in known:
			warnings.append(ConsistencyWarning(
				code="unknown_speaker",
				path=f"transcript.talk_time.speakers.{speaker_id}",
				message=f"{speaker_id} has talk time but does not appear in the speaker map",
			))
	return warnings


def check_consistency(report: V2EvaluationData, tolerance: Optional[float] = None) -> List[ConsistencyWarning]:
	"""Return every cross-field inconsistency found in a validated report.

	Score comparisons allow `tolerance` points of drift (settings.score_tolerance
	by default).
	"""
	limit = settings.score_tolerance if tolerance is None else tolerance
	warnings = _check_scores(report, limit)
	warnings += _check_speakers(report)
	warnings += _check_spans(report.transcript.segments, "transcript.segments")
	warnings += _check_spans(report.interactive_analysis.topic_segments, "interactive_analysis.topic_segments")
	if warnings:
		logger.warning("Consistency check found %d issue(s): %s", len(warnings), ", ".join(sorted({w.code for w in warnings})))
	return warnings
