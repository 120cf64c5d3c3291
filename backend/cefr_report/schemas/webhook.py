"""
Report envelope and webhook payload schemas.

The payload is a tagged union on `status`: a `completed` payload carries the
evaluation `data`, a `failed` payload carries an `error` string. Both
variants forbid unknown keys, so a payload can never hold both.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import ConfigDict, Field

from .analysis import Analysis
from .base import NonNegativeNumber, ReportModel
from .clarity import ClarityReport
from .fluency import FluencyReport
from .grammar import GrammarReport
from .pronunciation import PronunciationReport
from .summary import Summary
from .transcript import Transcript
from .vocabulary import VocabularyReport


class CEFRReports(ReportModel):
	summary: Summary
	grammar: GrammarReport
	vocabulary: VocabularyReport
	fluency: FluencyReport
	pronunciation: PronunciationReport
	clarity: ClarityReport


class Reports(ReportModel):
	cefr: CEFRReports


class V2EvaluationData(ReportModel):
	"""The full report handed to rendering code."""
	transcript: Transcript
	interactive_analysis: Analysis
	reports: Reports


class CompletedPayload(ReportModel):
	model_config = ConfigDict(extra="forbid")

	recording_id: str
	correlation_id: str
	status: Literal["completed"]
	data: V2EvaluationData
	processing_time_ms: NonNegativeNumber


class FailedPayload(ReportModel):
	model_config = ConfigDict(extra="forbid")

	recording_id: str
	correlation_id: str
	status: Literal["failed"]
	error: str
	processing_time_ms: NonNegativeNumber


WebhookPayload = Annotated[Union[CompletedPayload, FailedPayload], Field(discriminator="status")]

PAYLOAD_VARIANTS = {
	"completed": CompletedPayload,
	"failed": FailedPayload,
}
