"""Tests for configuration.py."""
import json
import os

import pytest

from gce_operation_tracker.configuration import export_service_account_credentials


@pytest.fixture
def no_credentials_env(monkeypatch):
    # setenv first so teardown restores whatever was there before
    monkeypatch.setenv("GOOGLE_APPLICATION_CREDENTIALS", "")
    monkeypatch.delenv("GOOGLE_APPLICATION_CREDENTIALS")


def test_blank_credentials_are_ignored(tmp_path, no_credentials_env):
    target = tmp_path / "credentials.json"

    export_service_account_credentials("   ", target)

    assert not target.exists()
    assert "GOOGLE_APPLICATION_CREDENTIALS" not in os.environ


def test_quoted_credentials_are_unwrapped(tmp_path, no_credentials_env):
    target = tmp_path / "credentials.json"

    export_service_account_credentials('"{"type": "service_account"}"', target)

    assert json.loads(target.read_text()) == {"type": "service_account"}
    assert os.environ["GOOGLE_APPLICATION_CREDENTIALS"] == str(target)


def test_existing_credentials_path_wins(tmp_path, monkeypatch):
    monkeypatch.setenv("GOOGLE_APPLICATION_CREDENTIALS", "/secrets/key.json")
    target = tmp_path / "credentials.json"

    export_service_account_credentials('{"type": "service_account"}', target)

    assert not target.exists()
