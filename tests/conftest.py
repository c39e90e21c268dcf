"""Shared pytest fixtures for the age_engine test suite.

Fixtures defined here are available to all test modules (unit and
integration) without any import.

No AWS credentials are required: the ``agent_runner`` fixture patches
``BedrockModel`` before any SDK initialisation can attempt a network call.
"""

import datetime
import os
from unittest.mock import MagicMock, patch

import pytest

# create_agent() refuses to build without a model ARN; seed a sentinel before
# any test module imports age_engine.config.
os.environ.setdefault("MODEL_ARN", "arn:aws:bedrock:us-east-1::foundation-model/test-model")

from age_engine.engine import AgeEngine  # noqa: E402


# ---------------------------------------------------------------------------
# Model fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_bedrock_model() -> MagicMock:
    """A MagicMock standing in for ``BedrockModel``."""
    model = MagicMock()
    model.invoke.return_value = {
        "role": "assistant",
        "content": [{"type": "text", "text": "Mocked response"}],
    }
    return model


# ---------------------------------------------------------------------------
# Agent fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def agent_runner(mock_bedrock_model: MagicMock):
    """Fully constructed ``strands.Agent`` with ``BedrockModel`` patched out.

    The tool registry, system prompt and message list are live; the
    underlying model never makes a Bedrock API call.
    """
    with patch("age_engine.agent.BedrockModel", return_value=mock_bedrock_model):
        from age_engine import create_agent
        return create_agent()


# ---------------------------------------------------------------------------
# Engine fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def fixed_today() -> datetime.date:
    return datetime.date(2024, 5, 19)


@pytest.fixture
def engine(fixed_today: datetime.date) -> AgeEngine:
    """An engine whose clock is pinned to ``fixed_today``."""
    return AgeEngine(today=lambda: fixed_today)
