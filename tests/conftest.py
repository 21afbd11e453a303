"""Shared fixtures for llmstack tests."""

from io import StringIO

import pytest

from llmstack.utils.logger import Logger


@pytest.fixture(autouse=True)
def log_output():
    """Configure logging into a buffer so modules can log during tests."""
    output = StringIO()
    Logger.configure(level="DEBUG", output=output)
    return output


@pytest.fixture
def baseline_data():
    """Single-model baseline document with a 10% tolerance."""
    return {
        "version": "1",
        "models": {
            "m1": {
                "tokenGeneration": {
                    "gpu": {"minTokensPerSec": 50, "maxTokensPerSec": 90},
                    "cpu": {"minTokensPerSec": 10, "maxTokensPerSec": 20},
                },
                "promptProcessing": {
                    "gpu": {"minTokensPerSec": 80, "maxTokensPerSec": 150},
                    "cpu": {"minTokensPerSec": 20, "maxTokensPerSec": 40},
                },
            }
        },
        "thresholds": {"regressionTolerancePct": 10},
    }


@pytest.fixture
def ollama_response():
    """Non-streaming /api/generate response body."""
    return {
        "model": "llama3.2:3b",
        "created_at": "2026-10-19T12:00:00Z",
        "response": "Layers stacked in rows",
        "done": True,
        "total_duration": 5043500667,
        "load_duration": 5025959,
        "prompt_eval_count": 26,
        "prompt_eval_duration": 325953000,
        "eval_count": 290,
        "eval_duration": 4709213000,
    }
