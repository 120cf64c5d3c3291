"""Holistic summary combining the five CEFR dimensions with an action plan."""

from __future__ import annotations

from typing import Literal, Tuple

from pydantic import Field

from .base import BaseScore, ReportModel, Score


MIN_ACTIONS = 3
MAX_ACTIONS = 5

# Strengths and limitations are meant to be the top three of each; this is
# reported by the consistency pass, not enforced by the schema.
SUMMARY_HIGHLIGHTS = 3


class DimensionScores(ReportModel):
	fluency: Score
	grammar: Score
	vocabulary: Score
	pronunciation: Score
	clarity: Score


class Summary(ReportModel):
	type: Literal["summary"]
	dimension_scores: DimensionScores
	score: BaseScore = Field(description="Holistic score; expected to be the average of the dimension scores")
	action_plan: Tuple[str, ...] = Field(min_length=MIN_ACTIONS, max_length=MAX_ACTIONS)
