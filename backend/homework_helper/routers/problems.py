from __future__ import annotations
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from ..analysis import normalize_text, segment
from ..db import get_db
from ..dependencies import get_llm_client, get_wolfram_client
from ..llm_client import LLMClient
from ..services.analysis_service import run_analysis, save_problem
from ..wolfram_client import WolframAlphaClient


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["problems"])


class AnalyzeRequest(BaseModel):
	problemText: str = ""
	userEmail: Optional[str] = None
	timeSpent: Optional[int] = Field(default=None, ge=0, description="Seconds spent on the problem")


class DebugParseRequest(BaseModel):
	problemText: str = ""


def _require_text(text: str) -> str:
	if not (text or "").strip():
		raise HTTPException(status_code=400, detail="Problem text is required")
	return text


@router.post("/analyze-problem")
async def analyze_problem(
	req: AnalyzeRequest,
	db: Session = Depends(get_db),
	llm_client: Optional[LLMClient] = Depends(get_llm_client),
	wolfram_client: Optional[WolframAlphaClient] = Depends(get_wolfram_client),
):
	text = _require_text(req.problemText)
	try:
		outcome = await run_analysis(text, llm_client=llm_client, wolfram_client=wolfram_client)
		save_problem(db, req.userEmail, outcome, time_spent=req.timeSpent)
	except Exception as e:
		logger.exception("analysis failed")
		raise HTTPException(status_code=500, detail=str(e))
	logger.info("analyzed problem via %s: %s (id=%s)", outcome.source, outcome.result.error_type, outcome.record_id)
	return outcome.to_response()


@router.post("/simple-analyze")
async def simple_analyze(req: AnalyzeRequest, db: Session = Depends(get_db)):
	text = _require_text(req.problemText)
	try:
		outcome = await run_analysis(text)
		save_problem(db, req.userEmail, outcome, time_spent=req.timeSpent)
	except Exception as e:
		logger.exception("simple analysis failed")
		raise HTTPException(status_code=500, detail=str(e))
	return outcome.to_response()


@router.post("/debug-parse")
def debug_parse(req: DebugParseRequest):
	text = _require_text(req.problemText)
	normalized = normalize_text(text)
	parts = segment(normalized)
	return {
		"success": True,
		"debug": {
			"inputText": text,
			"inputLength": len(text),
			"inputLines": text.split("\n"),
			"normalizedText": normalized,
			"parsedProblem": parts.original_problem,
			"parsedSolution": parts.student_solution,
			"problemLength": len(parts.original_problem),
			"solutionLength": len(parts.student_solution),
		},
	}
