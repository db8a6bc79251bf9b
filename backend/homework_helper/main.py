import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .db import Base, create_db_engine, create_session_factory, ensure_schema
from .llm_client import LLMClient
from .logging_config import configure_logging
from .settings import settings
from .wolfram_client import WolframAlphaClient
from . import models  # noqa: F401  registers tables on Base
from .routers import health
from .routers import problems
from .routers import uploads
from .routers import dashboard

logger = logging.getLogger(__name__)

app = FastAPI(title="Homework Helper API")
app.add_middleware(
	CORSMiddleware,
	allow_origins=settings.cors_allow_origins,
	allow_methods=["GET", "POST", "OPTIONS"],
	allow_headers=["Content-Type"],
)
app.include_router(health.router)
app.include_router(problems.router)
app.include_router(uploads.router)
app.include_router(dashboard.router)


@app.get("/info")
def root():
	return {
		"status": "ok",
		"llm_configured": bool(settings.openai_api_key),
		"wolfram_configured": bool(settings.wolfram_app_id),
	}


@app.on_event("startup")
async def startup_event():
	configure_logging()
	engine = create_db_engine(settings.database_url)
	app.state.engine = engine
	app.state.session_factory = create_session_factory(engine)
	# Initialize DB schema
	Base.metadata.create_all(bind=engine)
	ensure_schema(engine)
	# External services are optional; handlers get None when unconfigured
	app.state.llm_client = LLMClient() if settings.openai_api_key else None
	app.state.wolfram_client = WolframAlphaClient() if settings.wolfram_app_id else None
	logger.info(
		"started (llm=%s, wolfram=%s)",
		app.state.llm_client is not None,
		app.state.wolfram_client is not None,
	)


@app.on_event("shutdown")
async def shutdown_event():
	if app.state.llm_client is not None:
		await app.state.llm_client.aclose()
	if app.state.wolfram_client is not None:
		await app.state.wolfram_client.aclose()
	app.state.engine.dispose()
