# tests/conftest.py
import pytest

from weighted_distance import CostProfile, DistanceEngine, SubstitutionOverrides
from weighted_distance import logger as wd_logger


@pytest.fixture
def engine():
    """A fresh engine with every weight at 1."""
    return DistanceEngine()


@pytest.fixture
def unit_costs():
    return CostProfile()


@pytest.fixture
def overrides():
    return SubstitutionOverrides()


@pytest.fixture
def captured_logs(monkeypatch):
    """
    Route the package's log records into a list for the duration of a test.
    """
    from loguru import logger

    monkeypatch.setattr(wd_logger, "_handler_id", None)
    messages = []
    handler_id = wd_logger.configure_logging("DEBUG", sink=messages.append,
                                             colorize=False)
    yield messages
    logger.remove(handler_id)
    logger.disable("weighted_distance")
