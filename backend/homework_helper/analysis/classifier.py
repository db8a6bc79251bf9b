from __future__ import annotations
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Tuple


class ErrorType(str, Enum):
	NO_ERROR = "no_error"
	COMPUTATIONAL = "computational"
	CONCEPTUAL = "conceptual"
	NO_SOLUTION_PROVIDED = "no_solution_provided"


class DifficultyLevel(str, Enum):
	BEGINNER = "beginner"
	INTERMEDIATE = "intermediate"
	ADVANCED = "advanced"


DEFAULT_CONFIDENCE = 0.75

# Solutions shorter than this are treated as "no work shown"
MIN_SOLUTION_LENGTH = 3

CANONICAL_LINEAR_PROBLEM = "2x + 3 = 7"
CANONICAL_LINEAR_ANSWER = "x = 2"

_LETTER_RE = re.compile(r"[A-Za-z]")
_DIGIT_RE = re.compile(r"\d")


@dataclass(frozen=True)
class Classification:
	error_type: ErrorType
	explanation: str
	hints: str
	confidence_score: float
	topic: str
	difficulty_level: DifficultyLevel


def coerce_confidence(value: Any, default: float = DEFAULT_CONFIDENCE) -> float:
	"""Return value as a score in [0, 1], or default when absent/invalid.

	Zero counts as absent, matching how model replies are treated upstream.
	"""
	if isinstance(value, bool) or value is None:
		return default
	try:
		score = float(value)
	except (TypeError, ValueError):
		return default
	if score != score or score <= 0 or score > 1:
		return default
	return score


def has_function_composition(text: str) -> bool:
	return "f(" in text and "g(" in text


def infer_topic(problem: str) -> Tuple[str, DifficultyLevel]:
	"""Keyword scan over the problem; first family that matches wins."""
	text = (problem or "").lower()
	if "derivative" in text or "d/dx" in text:
		return "calculus", DifficultyLevel.ADVANCED
	if any(k in text for k in ("sin", "cos", "tan")):
		return "trigonometry", DifficultyLevel.INTERMEDIATE
	if has_function_composition(text):
		return "functions", DifficultyLevel.INTERMEDIATE
	if any(k in text for k in ("x²", "x^2", "quadratic")):
		return "algebra", DifficultyLevel.INTERMEDIATE
	if any(k in text for k in ("triangle", "circle", "area")):
		return "geometry", DifficultyLevel.INTERMEDIATE
	return "algebra", DifficultyLevel.BEGINNER


def _verdict(problem: str, solution: str) -> Tuple[ErrorType, str, str, float]:
	has_equals = "=" in solution
	has_letter = bool(_LETTER_RE.search(solution))
	has_digit = bool(_DIGIT_RE.search(solution))

	if not (has_equals and has_letter and has_digit):
		return (
			ErrorType.CONCEPTUAL,
			"Your work doesn't show a complete mathematical argument yet. Review the concept behind the problem and write out each step as an equation.",
			"Write each step as an equation using the variables from the problem, and finish with a clear final answer.",
			0.60,
		)

	if CANONICAL_LINEAR_PROBLEM in problem and CANONICAL_LINEAR_ANSWER in solution:
		return (
			ErrorType.NO_ERROR,
			"Great job! Your solution is correct: subtracting 3 and then dividing by 2 gives x = 2.",
			"Keep checking your answer by substituting it back into the original equation.",
			0.95,
		)

	if has_function_composition(problem):
		if "g(3)" in solution and "f(" in solution:
			return (
				ErrorType.NO_ERROR,
				"Great job! You evaluated the inner function g(3) first and substituted the result into f.",
				"For compositions, always work from the innermost function outward.",
				0.90,
			)
		return (
			ErrorType.COMPUTATIONAL,
			"Check your calculations for the function composition. Evaluate the inner function first, then substitute that value into the outer function.",
			"Find g(3) first, simplify the expression inside f, and only then apply f.",
			DEFAULT_CONFIDENCE,
		)

	if "x" in problem and "x =" in solution:
		return (
			ErrorType.COMPUTATIONAL,
			"Check your calculations - there might be an arithmetic error in one of your steps.",
			"Substitute your value of x back into the original equation to verify it.",
			DEFAULT_CONFIDENCE,
		)

	return (
		ErrorType.CONCEPTUAL,
		"Review the problem-solving approach and make sure you understand the concept being tested.",
		"Identify what the question is asking for before you start calculating.",
		0.70,
	)


def classify(problem: str, solution: str) -> Classification:
	"""Rule-based error classification of a student's solution.

	Correctness is judged only by string patterns against the canonical
	problems; there is no symbolic evaluation.
	"""
	problem = problem or ""
	solution = solution or ""
	topic, difficulty = infer_topic(problem)

	if len(solution) < MIN_SOLUTION_LENGTH:
		return Classification(
			error_type=ErrorType.NO_SOLUTION_PROVIDED,
			explanation="No solution was found in your upload. Here is how to approach the problem step by step.",
			hints="Try the first step yourself and upload your work so I can give you feedback.",
			confidence_score=0.9,
			topic=topic,
			difficulty_level=difficulty,
		)

	error_type, explanation, hints, confidence = _verdict(problem, solution)
	return Classification(
		error_type=error_type,
		explanation=explanation,
		hints=hints,
		confidence_score=confidence,
		topic=topic,
		difficulty_level=difficulty,
	)
