import pytest
from fastapi.testclient import TestClient

from maternal_rulesets.ruleset import RulesetStore
from maternal_server.app import create_app
from maternal_server.config import ServerSettings


@pytest.fixture(scope="session")
def store():
    """Load the full RulesetStore once for the entire test session."""
    s = RulesetStore()
    s.load()
    return s


@pytest.fixture
def client():
    """TestClient with the lifespan handler run (store and scorers built)."""
    app = create_app(ServerSettings(log_level="WARNING"))
    with TestClient(app) as c:
        yield c
