from __future__ import annotations
import logging
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker, declarative_base


logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///./homework_helper.db"

Base = declarative_base()


def create_db_engine(database_url: str | None) -> Engine:
	url = database_url or DEFAULT_DATABASE_URL
	connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
	return create_engine(url, connect_args=connect_args, pool_pre_ping=True, future=True)


def create_session_factory(engine: Engine) -> sessionmaker:
	return sessionmaker(autocommit=False, autoflush=False, bind=engine, future=True)


def get_db(request: Request) -> Iterator[Session]:
	db = request.app.state.session_factory()
	try:
		yield db
	finally:
		db.close()


# Columns added after the first deployment; older databases get them on startup
_LATE_PROBLEM_COLUMNS = {
	"correct_solution": "TEXT",
	"wolfram_solution": "TEXT",
	"time_spent": "INTEGER",
}


def ensure_schema(engine: Engine) -> None:
	inspector = inspect(engine)
	if "problems" not in set(inspector.get_table_names()):
		return
	cols = {c["name"] for c in inspector.get_columns("problems")}
	missing = {name: ddl for name, ddl in _LATE_PROBLEM_COLUMNS.items() if name not in cols}
	if not missing:
		return
	with engine.begin() as conn:
		for name, ddl in missing.items():
			logger.info("adding column problems.%s", name)
			conn.exec_driver_sql(f"ALTER TABLE problems ADD COLUMN {name} {ddl}")
