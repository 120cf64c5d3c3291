from __future__ import annotations

import hmac
import logging
from collections import OrderedDict
from typing import List, Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Request
from pydantic import BaseModel

from ..consistency import ConsistencyWarning, check_consistency
from ..schemas import CompletedPayload, V2EvaluationData
from ..settings import settings
from ..validation import validate_payload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["webhooks"])


class WebhookAck(BaseModel):
	status: str
	recording_id: str
	correlation_id: str
	warnings: List[ConsistencyWarning] = []


# Most recent validated reports by recording id, oldest first
_reports: "OrderedDict[str, V2EvaluationData]" = OrderedDict()


def _remember(recording_id: str, report: V2EvaluationData) -> None:
	_reports[recording_id] = report
	_reports.move_to_end(recording_id)
	while len(_reports) > settings.report_store_size:
		_reports.popitem(last=False)


def verify_webhook_secret(x_webhook_secret: Optional[str] = Header(default=None)) -> None:
	expected = settings.webhook_secret
	if not expected:
		return
	if not x_webhook_secret or not hmac.compare_digest(x_webhook_secret, expected):
		raise HTTPException(status_code=401, detail="invalid webhook secret")


@router.post("/webhooks/evaluation", response_model=WebhookAck)
async def receive_evaluation(request: Request, _: None = Depends(verify_webhook_secret)):
	try:
		raw = await request.json()
	except ValueError:
		raise HTTPException(status_code=400, detail="body is not valid JSON")

	result = validate_payload(raw)
	if not result.ok:
		raise HTTPException(
			status_code=422,
			detail=[v.model_dump(mode="json") for v in result.violations],
		)

	payload = result.value
	warnings: List[ConsistencyWarning] = []
	if isinstance(payload, CompletedPayload):
		warnings = check_consistency(payload.data)
		_remember(payload.recording_id, payload.data)
		logger.info("Stored report for recording %s (%d ms)", payload.recording_id, payload.processing_time_ms)
	else:
		logger.warning("Analysis failed for recording %s", payload.recording_id)

	return WebhookAck(
		status=payload.status,
		recording_id=payload.recording_id,
		correlation_id=payload.correlation_id,
		warnings=warnings,
	)


@router.get("/reports/{recording_id}", response_model=V2EvaluationData)
def get_report(recording_id: str):
	report = _reports.get(recording_id)
	if report is None:
		raise HTTPException(status_code=404, detail="report not found")
	return report
