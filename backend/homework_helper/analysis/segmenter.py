from __future__ import annotations
import logging
import re
from dataclasses import dataclass

from .notation import repair_problem, repair_solution


logger = logging.getLogger(__name__)

# A strategy "wins" only when it leaves at least this much solution text.
# The value has no documented rationale; keep it literal.
MIN_SEGMENT_LENGTH = 10

_FIRST_STEP_RE = re.compile(r"step\s+\d+.*$", re.IGNORECASE | re.DOTALL)
_RESULT_SENTENCE_RE = re.compile(r"result\s*:?\s*the\s+value.*?is\s+\d+\.?$", re.IGNORECASE | re.DOTALL)
_STEP_ONE_SPLIT_RE = re.compile(r"(.*?)step\s+1\s*:(.*)", re.IGNORECASE | re.DOTALL)
_COMPUTE_SPLIT_RE = re.compile(r"(.*?)compute\s+(.*)", re.IGNORECASE | re.DOTALL)


@dataclass(frozen=True)
class Segmentation:
	original_problem: str
	student_solution: str


def strip_result_sentence(solution: str) -> str:
	"""Drop a trailing "Result: the value of x is 2." summary line."""
	return _RESULT_SENTENCE_RE.sub("", solution).strip()


def _split_on_question_mark(text: str) -> tuple[str, str]:
	head, mark, tail = text.partition("?")
	if not mark:
		return "", ""
	problem = (head + mark).strip()
	candidate = tail.strip()
	if len(candidate) <= MIN_SEGMENT_LENGTH:
		return problem, ""
	step = _FIRST_STEP_RE.search(candidate)
	solution = step.group(0) if step else candidate
	return problem, strip_result_sentence(solution)


def _split_on_label(text: str, pattern: re.Pattern[str], label: str) -> tuple[str, str] | None:
	match = pattern.search(text)
	if not match:
		return None
	problem = match.group(1).strip()
	solution = strip_result_sentence(label + match.group(2).strip())
	return problem, solution


def segment(text: str) -> Segmentation:
	"""Split normalized text into the problem statement and the student's work.

	Strategies run in priority order (question mark, "Step 1:", "Compute")
	and later ones only run while the solution is shorter than
	MIN_SEGMENT_LENGTH. If no strategy finds a usable problem, the whole text
	is the problem and the solution is empty.
	"""
	text = text or ""
	problem, solution = _split_on_question_mark(text)
	strategy = "question_mark" if problem else None

	if len(solution) < MIN_SEGMENT_LENGTH:
		split = _split_on_label(text, _STEP_ONE_SPLIT_RE, "Step 1:")
		if split is not None:
			problem, solution = split
			strategy = "step_one"

	if len(solution) < MIN_SEGMENT_LENGTH:
		split = _split_on_label(text, _COMPUTE_SPLIT_RE, "Compute ")
		if split is not None:
			problem, solution = split
			strategy = "compute"

	if problem:
		problem = repair_problem(problem)
	if solution:
		solution = repair_solution(solution)

	if len(problem) < MIN_SEGMENT_LENGTH:
		logger.debug("segmentation fell back to whole text (strategy=%s)", strategy)
		return Segmentation(original_problem=text, student_solution="")

	logger.debug("segmented via %s: problem=%d chars, solution=%d chars", strategy, len(problem), len(solution))
	return Segmentation(original_problem=problem, student_solution=solution)
