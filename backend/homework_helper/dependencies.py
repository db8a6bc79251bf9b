from typing import Optional

from fastapi import Request

from .llm_client import LLMClient
from .wolfram_client import WolframAlphaClient


def get_llm_client(request: Request) -> Optional[LLMClient]:
	return getattr(request.app.state, "llm_client", None)


def get_wolfram_client(request: Request) -> Optional[WolframAlphaClient]:
	return getattr(request.app.state, "wolfram_client", None)
