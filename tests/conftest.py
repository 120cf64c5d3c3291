import copy
import json
from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"

with open(DATA_DIR / "completed_payload.json", encoding="utf-8") as f:
	_COMPLETED = json.load(f)


@pytest.fixture
def completed_payload():
	"""A fresh, fully valid `completed` webhook payload."""
	return copy.deepcopy(_COMPLETED)


@pytest.fixture
def report_data(completed_payload):
	return completed_payload["data"]


@pytest.fixture
def cefr(report_data):
	return report_data["reports"]["cefr"]


@pytest.fixture
def failed_payload():
	return {
		"recording_id": "rec_7f3a91",
		"correlation_id": "corr_20261018_0042",
		"status": "failed",
		"error": "Transcription timed out after 3 retries",
		"processing_time_ms": 90000,
	}
