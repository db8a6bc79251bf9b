import os
import tempfile
from pathlib import Path

import pytest

# Must run before homework_helper.settings is imported
_DB_DIR = tempfile.mkdtemp(prefix="homework_helper_tests_")
os.environ["DATABASE_URL"] = f"sqlite:///{Path(_DB_DIR) / 'test.db'}"
for _var in ("OPENAI_API_KEY", "OPENROUTER_API_KEY", "WOLFRAM_APP_ID"):
    os.environ.pop(_var, None)

from fastapi.testclient import TestClient  # noqa: E402

from homework_helper.main import app  # noqa: E402
from homework_helper.models import Problem  # noqa: E402


@pytest.fixture
def client():
    """API client with a started app and an empty problems table."""
    with TestClient(app) as test_client:
        session = app.state.session_factory()
        try:
            session.query(Problem).delete()
            session.commit()
        finally:
            session.close()
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def db_session(client):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()
