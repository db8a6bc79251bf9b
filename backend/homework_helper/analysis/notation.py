from __future__ import annotations
import re
from typing import List, Pattern, Tuple


EM_DASH = "—"

_WHITESPACE_RE = re.compile(r"\s+")

# Ordered (pattern, replacement) pairs for known OCR misreads
PROBLEM_FIXES: List[Tuple[Pattern[str], str]] = [
	(re.compile(r"f\(z\)\s*=\s*2x"), "f(x) = 2x"),
	(re.compile(r"x\?\s*" + EM_DASH + r"\s*3"), "x² - 3"),
	(re.compile(EM_DASH), "-"),
]

SOLUTION_FIXES: List[Tuple[Pattern[str], str]] = [
	(re.compile(r"g\(3\)\s*=\s*32\s*-\s*3"), "g(3) = 3² - 3"),
	(re.compile(EM_DASH), "-"),
]


def _apply(text: str, fixes: List[Tuple[Pattern[str], str]]) -> str:
	for pattern, replacement in fixes:
		text = pattern.sub(replacement, text)
	return _WHITESPACE_RE.sub(" ", text).strip()


def repair_problem(text: str) -> str:
	return _apply(text or "", PROBLEM_FIXES)


def repair_solution(text: str) -> str:
	return _apply(text or "", SOLUTION_FIXES)
