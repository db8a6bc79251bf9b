from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict

from .classifier import classify
from .normalizer import normalize_text
from .segmenter import segment
from .steps import generate_steps


@dataclass(frozen=True)
class AnalysisResult:
	original_problem: str
	student_solution: str
	error_type: str
	explanation: str
	hints: str
	confidence_score: float
	topic: str
	difficulty_level: str
	correct_steps: str

	def to_dict(self) -> Dict[str, Any]:
		return {
			"originalProblem": self.original_problem,
			"studentSolution": self.student_solution,
			"errorType": self.error_type,
			"explanation": self.explanation,
			"hints": self.hints,
			"confidenceScore": self.confidence_score,
			"topic": self.topic,
			"difficultyLevel": self.difficulty_level,
			"correctSteps": self.correct_steps,
		}


def analyze(raw_text: str) -> AnalysisResult:
	"""Run the heuristic pipeline over raw OCR text.

	Pure and deterministic: no I/O, no clock, no shared state.
	"""
	normalized = normalize_text(raw_text)
	parts = segment(normalized)
	verdict = classify(parts.original_problem, parts.student_solution)
	steps = generate_steps(parts.original_problem)
	return AnalysisResult(
		original_problem=parts.original_problem,
		student_solution=parts.student_solution,
		error_type=verdict.error_type.value,
		explanation=verdict.explanation,
		hints=verdict.hints,
		confidence_score=verdict.confidence_score,
		topic=verdict.topic,
		difficulty_level=verdict.difficulty_level.value,
		correct_steps="\n".join(steps),
	)
