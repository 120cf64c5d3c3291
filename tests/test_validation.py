import json
import math

import pytest
from pydantic import ValidationError

from cefr_report import ViolationKind, validate_payload, validate_report
from cefr_report.schemas import CompletedPayload, FailedPayload, V2EvaluationData
from cefr_report.validation import format_path, summarize_value


def test_empty_object_reports_missing_status():
	result = validate_report({})
	assert not result.ok
	[violation] = result.violations
	assert violation.path == "status"
	assert violation.kind == ViolationKind.STRUCTURAL


def test_unknown_status_is_structural(completed_payload):
	completed_payload["status"] = "pending"
	result = validate_payload(completed_payload)
	assert not result.ok
	[violation] = result.violations
	assert violation.path == "status"
	assert violation.kind == ViolationKind.STRUCTURAL
	assert violation.value == "pending"


def test_completed_payload_yields_report(completed_payload):
	result = validate_report(completed_payload)
	assert result.ok
	assert isinstance(result.value, V2EvaluationData)
	assert isinstance(result.payload, CompletedPayload)
	assert result.report is result.value
	assert result.value.reports.cefr.grammar.score.score == 72
	assert result.payload.recording_id == "rec_7f3a91"


def test_validate_payload_returns_envelope(completed_payload):
	result = validate_payload(completed_payload)
	assert result.ok
	assert isinstance(result.value, CompletedPayload)
	assert result.report.transcript.speaker_map[1].speaker_name == "Marta"


def test_report_attributes_cannot_be_reassigned(completed_payload):
	report = validate_report(completed_payload).value
	with pytest.raises(ValidationError):
		report.transcript = None


def test_nested_collections_are_read_only(completed_payload):
	report = validate_report(completed_payload).value
	grammar = report.reports.cefr.grammar
	with pytest.raises(AttributeError):
		grammar.score.strengths.append("injected")
	with pytest.raises(TypeError):
		grammar.segments[0].tags[0] = "Word Order"
	with pytest.raises(TypeError):
		report.transcript.talk_time.speakers["SPEAKER_09"] = "00:00:01"
	with pytest.raises(AttributeError):
		report.reports.cefr.summary.action_plan.clear()
	assert "injected" not in grammar.score.strengths
	assert "SPEAKER_09" not in report.transcript.talk_time.speakers


def test_read_only_collections_serialize_as_json(completed_payload):
	report = validate_report(completed_payload).value
	dumped = report.model_dump(mode="json")
	assert dumped["transcript"]["talk_time"]["speakers"] == {"SPEAKER_00": "00:00:09", "SPEAKER_01": "00:00:29"}
	assert dumped["reports"]["cefr"]["summary"]["action_plan"] == completed_payload["data"]["reports"]["cefr"]["summary"]["action_plan"]
	assert report.model_dump()["transcript"]["talk_time"]["speakers"] == {"SPEAKER_00": "00:00:09", "SPEAKER_01": "00:00:29"}


def test_well_formed_failed_payload(failed_payload):
	result = validate_payload(failed_payload)
	assert result.ok
	assert isinstance(result.value, FailedPayload)
	assert result.report is None


def test_failed_payload_is_not_a_report(failed_payload):
	result = validate_report(failed_payload)
	assert not result.ok
	[violation] = result.violations
	assert violation.kind == ViolationKind.ANALYSIS_FAILED
	assert violation.path == "error"
	assert violation.value == "Transcription timed out after 3 retries"
	assert not result.structural


def test_failed_payload_with_data_is_rejected(completed_payload):
	completed_payload["status"] = "failed"
	result = validate_payload(completed_payload)
	assert not result.ok
	assert sorted(result.paths) == ["data", "error"]
	assert all(v.kind == ViolationKind.STRUCTURAL for v in result.violations)


def test_completed_payload_without_data(completed_payload):
	del completed_payload["data"]
	result = validate_report(completed_payload)
	assert result.paths == ["data"]
	assert result.structural


def test_unexpected_envelope_key(completed_payload):
	completed_payload["error"] = "should not be here"
	result = validate_payload(completed_payload)
	assert result.paths == ["error"]
	assert result.violations[0].kind == ViolationKind.STRUCTURAL


def test_every_violation_is_reported(completed_payload):
	cefr = completed_payload["data"]["reports"]["cefr"]
	cefr["grammar"]["score"]["score"] = 140
	cefr["fluency"]["segments"][0]["timestamp"] = "0:12"
	cefr["vocabulary"]["segments"][0]["tags"] = ["Verb Tense"]
	completed_payload["processing_time_ms"] = -5
	result = validate_report(completed_payload)
	assert not result.ok
	assert sorted(result.paths) == [
		"data.reports.cefr.fluency.segments[0].timestamp",
		"data.reports.cefr.grammar.score.score",
		"data.reports.cefr.vocabulary.segments[0].tags[0]",
		"processing_time_ms",
	]
	assert {v.kind for v in result.violations} == {ViolationKind.CONSTRAINT}


def test_unknown_grammar_tag_path(completed_payload):
	segments = completed_payload["data"]["reports"]["cefr"]["grammar"]["segments"]
	segments[1]["tags"] = ["Subject-Verb Agreement", "Spelling"]
	result = validate_report(completed_payload)
	[violation] = result.violations
	assert violation.path == "data.reports.cefr.grammar.segments[1].tags[1]"
	assert violation.value == "Spelling"
	assert "grammar" in violation.message


def test_segments_of_wrong_type_are_not_descended(completed_payload):
	completed_payload["data"]["reports"]["cefr"]["clarity"]["segments"] = {"0": "not a list"}
	result = validate_report(completed_payload)
	[violation] = result.violations
	assert violation.path == "data.reports.cefr.clarity.segments"
	assert violation.kind == ViolationKind.TYPE_MISMATCH


@pytest.mark.parametrize("score", [0, 100, 55.5])
def test_score_boundaries_accepted(completed_payload, score):
	completed_payload["data"]["reports"]["cefr"]["summary"]["score"]["score"] = score
	assert validate_report(completed_payload).ok


@pytest.mark.parametrize(
	"score, kind",
	[
		(-1, ViolationKind.CONSTRAINT),
		(100.0001, ViolationKind.CONSTRAINT),
		("50", ViolationKind.TYPE_MISMATCH),
		(None, ViolationKind.TYPE_MISMATCH),
		(True, ViolationKind.TYPE_MISMATCH),
	],
)
def test_score_rejections(completed_payload, score, kind):
	completed_payload["data"]["reports"]["cefr"]["summary"]["score"]["score"] = score
	result = validate_report(completed_payload)
	[violation] = result.violations
	assert violation.path == "data.reports.cefr.summary.score.score"
	assert violation.kind == kind


def test_nan_score_rejected(completed_payload):
	completed_payload["data"]["reports"]["cefr"]["fluency"]["score"]["score"] = math.nan
	assert not validate_report(completed_payload).ok


def test_wrong_dimension_type_inside_payload(completed_payload):
	completed_payload["data"]["reports"]["cefr"]["grammar"]["type"] = "vocabulary"
	result = validate_report(completed_payload)
	assert "data.reports.cefr.grammar.type" in result.paths
	assert result.structural


def test_emotion_timeline_accepts_free_text(completed_payload):
	timeline = completed_payload["data"]["interactive_analysis"]["emotion_timeline"]
	timeline[0]["emotion"] = "wistful"
	assert validate_report(completed_payload).ok


def test_dominant_emotion_is_closed(completed_payload):
	sentiment = completed_payload["data"]["interactive_analysis"]["overall_sentiment"]
	sentiment[0]["dominant_emotion"] = "wistful"
	result = validate_report(completed_payload)
	assert result.paths == ["data.interactive_analysis.overall_sentiment[0].dominant_emotion"]


def test_unknown_safety_category(completed_payload):
	completed_payload["data"]["interactive_analysis"]["safety_flags"]["flagged_categories"] = ["gossip"]
	result = validate_report(completed_payload)
	assert result.paths == ["data.interactive_analysis.safety_flags.flagged_categories[0]"]


def test_optional_analysis_fields_may_be_absent(completed_payload):
	analysis = completed_payload["data"]["interactive_analysis"]
	del analysis["safety_flags"]["flagged_categories"]
	for event in analysis["emotion_timeline"]:
		del event["intensity"]
		del event["confidence"]
	del analysis["overall_sentiment"][0]["sentiment_score"]
	assert validate_report(completed_payload).ok


def test_action_plan_bounds(completed_payload):
	summary = completed_payload["data"]["reports"]["cefr"]["summary"]
	summary["action_plan"] = summary["action_plan"][:2]
	assert validate_report(completed_payload).paths == ["data.reports.cefr.summary.action_plan"]
	summary["action_plan"] = ["step"] * 6
	assert validate_report(completed_payload).paths == ["data.reports.cefr.summary.action_plan"]


@pytest.mark.parametrize("raw", [None, [], "completed", 42])
def test_non_object_payload(raw):
	result = validate_report(raw)
	[violation] = result.violations
	assert violation.path == ""
	assert violation.kind == ViolationKind.TYPE_MISMATCH


def test_callables_are_rejected_loudly():
	with pytest.raises(TypeError):
		validate_report(lambda: None)
	with pytest.raises(TypeError):
		validate_payload(json)


def test_long_values_are_truncated(completed_payload):
	completed_payload["data"]["reports"]["cefr"]["grammar"]["segments"][0]["timestamp"] = "x" * 500
	result = validate_report(completed_payload, max_chars=40)
	[violation] = result.violations
	assert len(violation.value) == 40
	assert violation.value.endswith("...")


def test_validation_is_deterministic(completed_payload):
	completed_payload["data"]["transcript"]["segments"][2]["speaker"] = "Examiner"
	completed_payload["data"]["reports"]["cefr"]["clarity"]["score"]["confidence_level"] = "certain"
	first = validate_report(completed_payload)
	second = validate_report(completed_payload)
	assert first == second


def test_input_is_not_mutated(completed_payload):
	snapshot = json.dumps(completed_payload, sort_keys=True)
	validate_report(completed_payload)
	assert json.dumps(completed_payload, sort_keys=True) == snapshot


def test_format_path():
	assert format_path(()) == ""
	assert format_path(("data", "segments", 2, "tags", 0)) == "data.segments[2].tags[0]"


def test_summarize_value():
	assert summarize_value(42, 10) == 42
	assert summarize_value("short", 10) == "short"
	assert summarize_value({"a": "b" * 50}, 20) == "<object with 1 keys>"
	assert summarize_value(list(range(30)), 20) == "<list of 30 items>"


@pytest.mark.parametrize("max_chars", [0, 2, 5])
def test_tiny_limits_still_truncate(max_chars):
	summary = summarize_value("x" * 500, max_chars)
	assert len(summary) == 8
	assert summary == "xxxxx..."


def test_tiny_limit_through_validate_report(completed_payload):
	completed_payload["data"]["reports"]["cefr"]["grammar"]["segments"][0]["timestamp"] = "x" * 500
	[violation] = validate_report(completed_payload, max_chars=2).violations
	assert len(violation.value) <= 8
