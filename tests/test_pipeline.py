"""
Tests for analysis.pipeline

Test Coverage:
- analyze(): end-to-end from raw OCR text to the assembled result
- AnalysisResult.to_dict(): wire keys
"""
from homework_helper.analysis import AnalysisResult, analyze
from homework_helper.analysis.steps import GENERAL_TEMPLATE, LINEAR_STEPS


RAW_CAPTURE = (
    "--- From img1.png ---\n"
    "What is 2x + 3 = 7?\n"
    "Step 1: 2x = 4\n"
    "Step 2: x = 2\n"
    "Result: the value of x is 2."
)


def test_end_to_end_canonical_capture():
    result = analyze(RAW_CAPTURE)

    assert result.original_problem == "What is 2x + 3 = 7?"
    assert result.student_solution.startswith("Step 1: 2x = 4")
    assert result.error_type == "no_error"
    assert result.confidence_score == 0.95
    assert result.topic == "algebra"
    assert result.difficulty_level == "beginner"
    assert result.correct_steps == "\n".join(LINEAR_STEPS)


def test_multiple_captures_with_crlf():
    raw = (
        "--- From page1.png ---\r\n"
        "What is 2x + 3 = 7?\r\n"
        "--- From page2.png ---\r\n"
        "Step 1:   2x = 4\r\n"
        "Step 2: x = 2"
    )

    result = analyze(raw)

    assert result.original_problem == "What is 2x + 3 = 7?"
    assert result.student_solution == "Step 1: 2x = 4 Step 2: x = 2"
    assert result.error_type == "no_error"


def test_problem_without_work():
    result = analyze("Simplify the expression 3a + 4a")

    assert result.original_problem == "Simplify the expression 3a + 4a"
    assert result.student_solution == ""
    assert result.error_type == "no_solution_provided"
    assert result.confidence_score == 0.9
    assert result.correct_steps


def test_empty_input_still_produces_steps():
    result = analyze("")

    assert result.original_problem == ""
    assert result.error_type == "no_solution_provided"
    assert result.correct_steps == "\n".join(GENERAL_TEMPLATE)


def test_ocr_composition_capture():
    raw = "--- From hw.jpg ---\nLet f(z) = 2x and g(x) = x² - 3.\nCompute g(3) = 32 - 3 = 6, then f(-2 - 6) = f(-8) = -16"

    result = analyze(raw)

    assert result.original_problem == "Let f(x) = 2x and g(x) = x² - 3."
    assert result.student_solution.startswith("Compute g(3) = 3² - 3 = 6")
    assert result.error_type == "no_error"
    assert result.confidence_score == 0.90
    assert result.topic == "functions"


def test_analyze_is_deterministic():
    assert analyze(RAW_CAPTURE) == analyze(RAW_CAPTURE)


def test_to_dict_uses_wire_keys():
    data = analyze(RAW_CAPTURE).to_dict()

    assert set(data) == {
        "originalProblem",
        "studentSolution",
        "errorType",
        "explanation",
        "hints",
        "confidenceScore",
        "topic",
        "difficultyLevel",
        "correctSteps",
    }
    assert isinstance(data["confidenceScore"], float)
    assert 0.0 <= data["confidenceScore"] <= 1.0


def test_result_is_immutable_value():
    result = analyze(RAW_CAPTURE)

    assert isinstance(result, AnalysisResult)
    assert hash(result) == hash(analyze(RAW_CAPTURE))
