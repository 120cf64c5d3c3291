import math

import pytest
from pydantic import ValidationError

from cefr_report.schemas import (
	BaseScore,
	DimensionScores,
	FeedbackSegment,
	SpeakerMapEntry,
	TopicSegment,
)


def _base_score(**overrides):
	score = {
		"strengths": ["Clear"],
		"limitations": ["Slow"],
		"score": 50,
		"confidence_level": "medium",
		"reason": "Solid effort.",
	}
	score.update(overrides)
	return score


@pytest.mark.parametrize("value", ["00:00:00", "01:59:59", "99:00:00"])
def test_timestamp_accepts_hh_mm_ss(value):
	assert TopicSegment(topic="intro", start_time=value, end_time=value).start_time == value


@pytest.mark.parametrize("value", ["1:00:00", "00:60:00", "00:00:60", "00:00", "00:00:00.5", " 00:00:00", ""])
def test_timestamp_rejects_other_shapes(value):
	with pytest.raises(ValidationError):
		TopicSegment(topic="intro", start_time=value, end_time="00:00:01")


@pytest.mark.parametrize("value", ["SPEAKER_00", "SPEAKER_42"])
def test_speaker_id_pattern(value):
	assert SpeakerMapEntry(speaker_id=value, speaker_name="x").speaker_id == value


@pytest.mark.parametrize("value", ["SPEAKER_1", "speaker_00", "SPEAKER_100", "SPK_00"])
def test_speaker_id_rejects(value):
	with pytest.raises(ValidationError):
		SpeakerMapEntry(speaker_id=value, speaker_name="x")


@pytest.mark.parametrize("value", [0, 100, 0.0, 100.0, 72.5])
def test_score_bounds_inclusive(value):
	assert BaseScore(**_base_score(score=value)).score == value


@pytest.mark.parametrize("value", [-1, -0.0001, 100.0001, 101, "50", None, True, math.nan, math.inf])
def test_score_rejects_out_of_range_and_non_numbers(value):
	with pytest.raises(ValidationError):
		BaseScore(**_base_score(score=value))


def test_confidence_level_is_closed():
	with pytest.raises(ValidationError):
		BaseScore(**_base_score(confidence_level="very high"))


def test_models_are_frozen():
	score = BaseScore(**_base_score())
	with pytest.raises(ValidationError):
		score.score = 90


@pytest.mark.parametrize("count", [1, 3])
def test_suggestion_count_within_bounds(count):
	segment = FeedbackSegment(
		timestamp="00:00:01",
		content="x",
		suggestion=["s"] * count,
		explanation="e",
	)
	assert len(segment.suggestion) == count


@pytest.mark.parametrize("count", [0, 4])
def test_suggestion_count_out_of_bounds(count):
	with pytest.raises(ValidationError):
		FeedbackSegment(timestamp="00:00:01", content="x", suggestion=["s"] * count, explanation="e")


def test_dimension_scores_require_all_five():
	with pytest.raises(ValidationError) as info:
		DimensionScores(fluency=1, grammar=2, vocabulary=3, pronunciation=4)
	assert [e["loc"] for e in info.value.errors()] == [("clarity",)]
