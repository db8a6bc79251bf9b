from datetime import datetime, timezone

from fastapi import APIRouter

from ..settings import settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
	return {"status": "ok"}


@router.get("/api/test")
def backend_test():
	return {
		"message": "Backend is working!",
		"timestamp": datetime.now(timezone.utc).isoformat(),
		"env": {
			"hasOpenAI": bool(settings.openai_api_key),
			"hasWolfram": bool(settings.wolfram_app_id),
			"hasDatabase": bool(settings.database_url),
		},
	}
