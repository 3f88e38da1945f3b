"""Pytest fixtures for gce_operation_tracker tests."""
import logging
from unittest.mock import MagicMock

import httplib2
import pytest
from googleapiclient.errors import HttpError

from gce_operation_tracker.OperationRefresher import OperationRefresher, RefreshResult


class FakeClock:
    """Clock whose time only moves when something sleeps on it."""

    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


class StubRefresher(OperationRefresher):
    """Replays refresh outcomes; the last one repeats forever."""

    def __init__(self, *outcomes):
        super().__init__("test-project")
        self.outcomes = list(outcomes)
        self.calls = []

    def refresh(self, operation):
        self.calls.append(operation)
        outcome = self.outcomes[min(len(self.calls), len(self.outcomes)) - 1]
        if isinstance(outcome, Exception):
            raise outcome
        if outcome is None:
            return RefreshResult.missing()
        return RefreshResult.found(outcome)


def http_error(status: int) -> HttpError:
    return HttpError(httplib2.Response({"status": status}), b'{"error": {"message": "boom"}}')


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def service_logger():
    return logging.getLogger("gce_operation_tracker.tests")


@pytest.fixture
def project():
    return "test-project-123"


@pytest.fixture
def compute():
    return MagicMock()
