"""
Report Validation
=================

Entry points that turn an untyped webhook payload (usually parsed JSON) into
typed, immutable report models.

- validate_payload: either envelope branch (`completed` or `failed`)
- validate_report: only a `completed` envelope; yields V2EvaluationData
- validate_model: any single schema model (used for per-dimension checks)

None of them raise for malformed data. They return ValidationSuccess or a
ValidationFailure listing every violation found, each with a dotted/bracketed
path (e.g. "data.reports.cefr.grammar.segments[2].tags[0]"), a kind, a
message and a summary of the offending value. Passing something that is not
JSON-like at all (a function, a class, a module) is a programming error and
raises TypeError.

Violation kinds:
- structural: required field missing, unexpected envelope key, or an
  unrecognized `status` / `type` discriminator
- constraint: a present value fails a range, enum, pattern, length, unit or
  tag vocabulary check
- type_mismatch: a value of the wrong kind; its subtree is not descended into
- analysis_failed: a well-formed `failed` envelope given to validate_report
"""

from __future__ import annotations

import logging
import types
from enum import Enum
from typing import Any, Iterable, List, Literal, Mapping, Optional, Sequence, Tuple, Type, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from .schemas import PAYLOAD_VARIANTS, CompletedPayload, FailedPayload, ReportModel, V2EvaluationData
from .settings import settings

logger = logging.getLogger(__name__)


class ViolationKind(str, Enum):
	STRUCTURAL = "structural"
	CONSTRAINT = "constraint"
	TYPE_MISMATCH = "type_mismatch"
	ANALYSIS_FAILED = "analysis_failed"


# Pydantic error types that mean the shape itself is wrong
_STRUCTURAL_ERRORS = {"missing", "extra_forbidden", "union_tag_invalid", "union_tag_not_found"}
_DISCRIMINATOR_FIELDS = {"type", "status"}
_TYPE_ERRORS = {"is_instance_of", "is_subclass_of", "callable_type"}

# Shortest summary limit; leaves room for the "..." marker
MIN_VALUE_CHARS = 8


def summarize_value(value: Any, max_chars: Optional[int] = None) -> Any:
	"""Return `value` itself when small, otherwise a short description of it."""
	limit = max(max_chars if max_chars is not None else settings.max_value_chars, MIN_VALUE_CHARS)
	if value is None or isinstance(value, (bool, int, float)):
		return value
	if isinstance(value, str):
		return value if len(value) <= limit else value[: limit - 3] + "..."
	if isinstance(value, Mapping):
		return value if len(repr(value)) <= limit else f"<object with {len(value)} keys>"
	if isinstance(value, (list, tuple)):
		return list(value) if len(repr(value)) <= limit else f"<list of {len(value)} items>"
	text = repr(value)
	return text if len(text) <= limit else text[: limit - 3] + "..."


def format_path(loc: Iterable[Union[str, int]]) -> str:
	"""("data", "segments", 2, "tags", 0) -> "data.segments[2].tags[0]"."""
	path = ""
	for part in loc:
		if isinstance(part, int):
			path += f"[{part}]"
		else:
			path += f".{part}" if path else str(part)
	return path


class Violation(BaseModel):
	model_config = ConfigDict(frozen=True)

	path: str
	kind: ViolationKind
	message: str
	value: Any = None

	@classmethod
	def describe(
		cls,
		path: str,
		kind: ViolationKind,
		message: str,
		value: Any,
		max_chars: Optional[int] = None,
	) -> "Violation":
		return cls(path=path, kind=kind, message=message, value=summarize_value(value, max_chars))


class ValidationSuccess(BaseModel):
	model_config = ConfigDict(frozen=True)

	ok: Literal[True] = True
	# The validated model: the report for validate_report, the envelope for validate_payload
	value: Any
	payload: Any = None

	@property
	def report(self) -> Optional[V2EvaluationData]:
		if isinstance(self.value, V2EvaluationData):
			return self.value
		if isinstance(self.value, CompletedPayload):
			return self.value.data
		return None


class ValidationFailure(BaseModel):
	model_config = ConfigDict(frozen=True)

	ok: Literal[False] = False
	violations: List[Violation]

	@property
	def structural(self) -> bool:
		return any(v.kind == ViolationKind.STRUCTURAL for v in self.violations)

	@property
	def paths(self) -> List[str]:
		return [v.path for v in self.violations]

	def of_kind(self, kind: ViolationKind) -> List[Violation]:
		return [v for v in self.violations if v.kind == kind]


ValidationResult = Union[ValidationSuccess, ValidationFailure]


def _kind_for(error_type: str, loc: Tuple[Union[str, int], ...]) -> ViolationKind:
	if error_type in _STRUCTURAL_ERRORS:
		return ViolationKind.STRUCTURAL
	if error_type == "literal_error" and loc and loc[-1] in _DISCRIMINATOR_FIELDS:
		return ViolationKind.STRUCTURAL
	if error_type.endswith("_type") or error_type in _TYPE_ERRORS:
		return ViolationKind.TYPE_MISMATCH
	return ViolationKind.CONSTRAINT


def violations_from_error(
	exc: ValidationError,
	prefix: Sequence[Union[str, int]] = (),
	max_chars: Optional[int] = None,
) -> List[Violation]:
	"""Convert every error in a pydantic ValidationError into a Violation."""
	violations = []
	for error in exc.errors(include_url=False):
		loc = tuple(prefix) + tuple(error["loc"])
		# For "missing" pydantic reports the parent object as input
		value = None if error["type"] == "missing" else error.get("input")
		violations.append(
			Violation.describe(
				format_path(loc),
				_kind_for(error["type"], loc),
				error["msg"],
				value,
				max_chars,
			)
		)
	return violations


def _reject_host_objects(raw: Any) -> None:
	if callable(raw) or isinstance(raw, types.ModuleType):
		raise TypeError(f"Expected JSON-like data, got {type(raw).__name__}")


def validate_model(model: Type[ReportModel], raw: Any, max_chars: Optional[int] = None) -> ValidationResult:
	"""Validate `raw` against a single schema model."""
	_reject_host_objects(raw)
	try:
		value = model.model_validate(raw)
	except ValidationError as exc:
		return ValidationFailure(violations=violations_from_error(exc, max_chars=max_chars))
	return ValidationSuccess(value=value)


def validate_payload(raw: Any, max_chars: Optional[int] = None) -> ValidationResult:
	"""Validate a webhook payload of either status.

	`status` is inspected first and selects the branch; the selected branch is
	then validated in full so that every violation is reported together.
	"""
	_reject_host_objects(raw)
	if not isinstance(raw, Mapping):
		return ValidationFailure(violations=[
			Violation.describe("", ViolationKind.TYPE_MISMATCH, "Payload must be a JSON object", raw, max_chars)
		])
	if "status" not in raw:
		logger.info("Rejected payload without status")
		return ValidationFailure(violations=[
			Violation(path="status", kind=ViolationKind.STRUCTURAL, message="Field required")
		])
	status = raw["status"]
	variant = PAYLOAD_VARIANTS.get(status) if isinstance(status, str) else None
	if variant is None:
		logger.info("Rejected payload with unrecognized status")
		expected = " or ".join(f"'{name}'" for name in PAYLOAD_VARIANTS)
		return ValidationFailure(violations=[
			Violation.describe("status", ViolationKind.STRUCTURAL, f"Input should be {expected}", status, max_chars)
		])

	result = validate_model(variant, dict(raw), max_chars)
	if not result.ok:
		logger.info(
			"Rejected %s payload: %d violation(s), structural=%s",
			status,
			len(result.violations),
			result.structural,
		)
	return result


def validate_report(raw: Any, max_chars: Optional[int] = None) -> ValidationResult:
	"""Validate a webhook payload and return the evaluation report it carries.

	On success `result.value` is the V2EvaluationData and `result.payload` the
	CompletedPayload envelope. A well-formed `failed` payload is returned as a
	failure with a single analysis_failed violation at `error`.
	"""
	result = validate_payload(raw, max_chars)
	if not result.ok:
		return result
	payload = result.value
	if isinstance(payload, FailedPayload):
		logger.info("Analysis failed upstream for recording %s", payload.recording_id)
		return ValidationFailure(violations=[
			Violation.describe(
				"error",
				ViolationKind.ANALYSIS_FAILED,
				"The analysis engine reported a failure",
				payload.error,
				max_chars,
			)
		])
	return ValidationSuccess(value=payload.data, payload=payload)
