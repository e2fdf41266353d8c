"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import random
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from recall.grading import AnswerScorer, ScoringConfig
from recall.models import QuizItem
from recall.scheduling import SM2Config, SM2Scheduler


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        # Mark based on test file location
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture
def now():
    """A fixed review moment."""
    return datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def scorer():
    """Scorer with default weights and pinned feedback phrasing."""
    return AnswerScorer(config=ScoringConfig(), rng=random.Random(0))


@pytest.fixture
def scheduler():
    """SM-2 scheduler with default constants."""
    return SM2Scheduler(SM2Config())


@pytest.fixture
def mitochondria_item():
    """Provide a sample biology item for testing."""
    return QuizItem(
        id="bio-001",
        prompt="What is the powerhouse of the cell?",
        accepted_answers=["mitochondria is the powerhouse of the cell"],
        keywords=["mitochondria", "powerhouse"],
        keyword_weights=[1, 1],
        difficulty="easy",
    )


@pytest.fixture
def osi_item():
    """Provide a networking item with weighted, multi-word keywords."""
    return QuizItem(
        id="net-007",
        prompt="What is the OSI model?",
        accepted_answers=[
            "A seven layer reference model for network communication",
            "The Open Systems Interconnection model",
        ],
        keywords=["seven layer", "reference model", "network", "communication"],
        keyword_weights=[3, 2, 1, 1],
        difficulty="medium",
    )
