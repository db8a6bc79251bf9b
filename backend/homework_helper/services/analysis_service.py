from __future__ import annotations
import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..analysis import AnalysisResult, analyze
from ..llm_client import LLMClient
from ..models import Problem
from ..wolfram_client import WolframAlphaClient
from .llm_analysis import analyze_with_llm


logger = logging.getLogger(__name__)

DEFAULT_APPROACH = "Follow the step-by-step approach shown in the correct steps."


@dataclass
class AnalysisOutcome:
	result: AnalysisResult
	source: str  # "heuristic" or "llm"
	correct_approach: str = DEFAULT_APPROACH
	wolfram_solution: Optional[str] = None
	record_id: Optional[int] = None

	@property
	def display_solution(self) -> str:
		# Wolfram's answer is preferred for display; the step plan is always there as a fallback
		return self.wolfram_solution or self.result.correct_steps

	def to_response(self) -> Dict[str, Any]:
		r = self.result
		return {
			"success": True,
			"id": self.record_id,
			"parsedContent": {
				"originalProblem": r.original_problem,
				"studentSolution": r.student_solution,
				"givenInformation": "",
			},
			"wolframSolution": self.display_solution,
			"analysis": {
				"errorType": r.error_type,
				"errorDescription": r.explanation,
				"explanation": r.explanation,
				"topic": r.topic,
				"difficultyLevel": r.difficulty_level,
				"confidenceScore": r.confidence_score,
				"hints": r.hints,
				"correctApproach": self.correct_approach,
				"correctSteps": r.correct_steps,
			},
			"source": self.source,
			"note": "Analysis saved to database" if self.record_id is not None else "Analysis completed (not saved)",
		}


async def run_analysis(
	problem_text: str,
	*,
	llm_client: Optional[LLMClient] = None,
	wolfram_client: Optional[WolframAlphaClient] = None,
) -> AnalysisOutcome:
	heuristic = analyze(problem_text)
	outcome = AnalysisOutcome(result=heuristic, source="heuristic")

	# the reference answer is looked up first so the LLM can grade against it
	if wolfram_client is not None:
		outcome.wolfram_solution = await wolfram_client.solve(heuristic.original_problem)

	if llm_client is not None:
		llm_result, approach = await analyze_with_llm(
			llm_client, problem_text, wolfram_solution=outcome.wolfram_solution
		)
		outcome.result = dataclasses.replace(llm_result, correct_steps=heuristic.correct_steps)
		outcome.source = "llm"
		if approach:
			outcome.correct_approach = approach

	return outcome


def save_problem(
	db: Session,
	user_email: Optional[str],
	outcome: AnalysisOutcome,
	*,
	time_spent: Optional[int] = None,
) -> Optional[int]:
	"""Persist the analysis; best-effort, returns None when skipped or failed."""
	if not user_email:
		return None
	r = outcome.result
	row = Problem(
		user_email=user_email,
		problem_text=r.original_problem,
		user_solution=r.student_solution,
		correct_solution=r.correct_steps,
		wolfram_solution=outcome.wolfram_solution,
		error_type=r.error_type,
		error_description=r.explanation,
		confidence_score=r.confidence_score,
		topic=r.topic,
		difficulty_level=r.difficulty_level,
		time_spent=time_spent,
	)
	try:
		db.add(row)
		db.commit()
		db.refresh(row)
	except SQLAlchemyError as e:
		db.rollback()
		logger.warning("Database save failed, continuing without saving: %s", e)
		return None
	outcome.record_id = row.id
	return row.id
