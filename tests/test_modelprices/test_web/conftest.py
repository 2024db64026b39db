from __future__ import annotations

import pytest

from modelprices.config import AppConfig
from modelprices.state import TableState
from modelprices.web.app import create_app

from tests.test_modelprices.conftest import StubFetcher, make_record

CATALOG = (
    make_record("openai/gpt-4o", "GPT-4o", input_cost="$2.5", description="Omni model."),
    make_record("anthropic/claude-3.5-sonnet", "Claude 3.5 Sonnet", input_cost="$3.0"),
    make_record("meta-llama/llama-3-8b:free", "Llama 3 8B (free)", input_cost="$0.0", output_cost="$0.0"),
)


@pytest.fixture
def fetcher():
    """Fetcher that always returns the three-model catalog."""
    return StubFetcher(CATALOG)


@pytest.fixture
def app(fetcher):
    """Create a Flask app for testing."""
    config = AppConfig()
    application = create_app(config=config, state=TableState(config), fetcher=fetcher)
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()


@pytest.fixture
def state(app) -> TableState:
    return app.extensions["table_state"]
