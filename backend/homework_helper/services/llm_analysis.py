from __future__ import annotations
import json
import logging
import re
from typing import Any, Dict, Optional

from ..analysis import AnalysisResult, coerce_confidence
from ..llm_client import LLMClient, LLMError


logger = logging.getLogger(__name__)

UNKNOWN = "unknown"


def build_analysis_prompt(problem_text: str, wolfram_solution: Optional[str] = None) -> str:
	reference = wolfram_solution.strip() if wolfram_solution and wolfram_solution.strip() else "Not available"
	return (
		f"Analyze this math problem and solution: {problem_text}\n\n"
		f"Correct solution (from Wolfram Alpha): {reference}\n\n"
		"Determine:\n"
		"1. What is the original problem?\n"
		"2. What is the student's solution (if any)?\n"
		"3. Is there an error? If so, what type (conceptual, computational, or no error)?\n"
		"   Compare the student's final answer with the correct solution when one is given.\n"
		"4. Provide helpful feedback.\n"
		"5. Rate your confidence in this analysis (0.0 to 1.0)\n\n"
		"Return ONLY a JSON object with keys: originalProblem (string), studentSolution (string), "
		"errorType (conceptual|computational|no_error|no_solution_provided), explanation (string), "
		"hints (string), confidenceScore (number 0-1), topic (algebra|calculus|geometry|trigonometry|functions|etc), "
		"difficultyLevel (beginner|intermediate|advanced), correctApproach (string).\n"
		"No markdown, no extra commentary."
	)


def extract_json_object(text: str) -> Dict[str, Any]:
	"""Parse the first JSON object in a model reply (raw, fenced or embedded)."""
	candidates = [text]
	code_block = re.search(r"```(?:json)?\s*([\s\S]*?)\s*```", text)
	if code_block:
		candidates.append(code_block.group(1))
	first = text.find("{")
	last = text.rfind("}")
	if first != -1 and last != -1 and last > first:
		candidates.append(text[first : last + 1])
	for candidate in candidates:
		try:
			data = json.loads(candidate)
		except ValueError:
			continue
		if isinstance(data, dict):
			return data
	raise ValueError("LLM did not return a JSON object")


def _text(data: Dict[str, Any], key: str, default: str) -> str:
	value = data.get(key)
	if isinstance(value, str) and value.strip():
		return value.strip()
	return default


def fallback_analysis(problem_text: str) -> AnalysisResult:
	return AnalysisResult(
		original_problem=problem_text,
		student_solution="",
		error_type=UNKNOWN,
		explanation="Unable to analyze at this time - please check your input and try again",
		hints="Make sure your problem is clearly written with both the question and your solution",
		confidence_score=0.1,
		topic=UNKNOWN,
		difficulty_level=UNKNOWN,
		correct_steps="",
	)


def result_from_reply(data: Dict[str, Any], problem_text: str) -> AnalysisResult:
	return AnalysisResult(
		original_problem=_text(data, "originalProblem", problem_text),
		student_solution=_text(data, "studentSolution", ""),
		error_type=_text(data, "errorType", UNKNOWN),
		explanation=_text(data, "explanation", ""),
		hints=_text(data, "hints", ""),
		confidence_score=coerce_confidence(data.get("confidenceScore")),
		topic=_text(data, "topic", "algebra"),
		difficulty_level=_text(data, "difficultyLevel", "intermediate"),
		correct_steps="",
	)


async def analyze_with_llm(
	client: LLMClient,
	problem_text: str,
	*,
	wolfram_solution: Optional[str] = None,
) -> tuple[AnalysisResult, str | None]:
	"""LLM analysis plus its suggested approach; the fixed fallback on any failure."""
	try:
		reply = await client.generate(build_analysis_prompt(problem_text, wolfram_solution))
		data = extract_json_object(reply)
	except (LLMError, ValueError) as e:
		logger.error("LLM analysis failed: %s", e)
		return fallback_analysis(problem_text), None
	approach = data.get("correctApproach")
	return result_from_reply(data, problem_text), approach if isinstance(approach, str) else None
