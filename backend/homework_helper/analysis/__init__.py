from .classifier import Classification, DifficultyLevel, ErrorType, classify, coerce_confidence, infer_topic
from .normalizer import normalize_text
from .notation import repair_problem, repair_solution
from .pipeline import AnalysisResult, analyze
from .segmenter import MIN_SEGMENT_LENGTH, Segmentation, segment
from .steps import composition_steps, generate_steps

__all__ = [
	"AnalysisResult",
	"Classification",
	"DifficultyLevel",
	"ErrorType",
	"MIN_SEGMENT_LENGTH",
	"Segmentation",
	"analyze",
	"classify",
	"coerce_confidence",
	"composition_steps",
	"generate_steps",
	"infer_topic",
	"normalize_text",
	"repair_problem",
	"repair_solution",
	"segment",
]
