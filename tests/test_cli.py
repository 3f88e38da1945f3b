"""Tests for cli.py and ComputeConnector.py."""
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from gce_operation_tracker.CompletionResult import CompletionResult
from gce_operation_tracker.ComputeConnector import ComputeConnector
from gce_operation_tracker.DiskResource import DiskResource
from gce_operation_tracker.OperationScope import OperationScope
from gce_operation_tracker.cli import EXIT_FAILURE, EXIT_TIMEOUT, cli
from gce_operation_tracker.configuration import DEFAULT_TIMEOUT_MILLIS
from gce_operation_tracker.exceptions import OperationTimeoutError


class TestComputeConnector:
    def test_requires_project(self, service_logger):
        with patch("gce_operation_tracker.ComputeConnector.PROJECT_ID", ""):
            with pytest.raises(ValueError):
                ComputeConnector(service_logger=service_logger)

    @patch("gce_operation_tracker.ComputeConnector.discovery.build")
    def test_builds_compute_client_lazily(self, mock_build, project, service_logger):
        connector = ComputeConnector(project=project, service_logger=service_logger)
        mock_build.assert_not_called()

        disks = connector.disks("us-central1-a")

        mock_build.assert_called_once_with("compute", "v1")
        assert isinstance(disks, DiskResource)
        assert disks.zone == "us-central1-a"

    def test_wait_builds_scoped_reference(self, compute, project, service_logger):
        connector = ComputeConnector(project=project, service_logger=service_logger, compute=compute)
        poller = MagicMock()
        poller.wait_for_completion.return_value = CompletionResult.success()

        with patch.object(connector, "poller", return_value=poller):
            connector.wait("op-1", region="us-west1", timeout_millis=2000)

        operation, timeout_millis = poller.wait_for_completion.call_args.args
        assert operation.scope is OperationScope.REGIONAL
        assert operation.scope_location == "us-west1"
        assert timeout_millis == 2000


class TestCli:
    @patch("gce_operation_tracker.cli.ComputeConnector")
    def test_wait_success(self, mock_connector_class):
        mock_connector_class.return_value.wait.return_value = CompletionResult.success()

        result = CliRunner().invoke(cli, ["wait", "op-1", "--project", "p", "--zone", "us-central1-a"])

        assert result.exit_code == 0
        assert "success" in result.output
        mock_connector_class.return_value.wait.assert_called_once_with(
            "op-1", zone="us-central1-a", region=None, timeout_millis=DEFAULT_TIMEOUT_MILLIS
        )

    @patch("gce_operation_tracker.cli.ComputeConnector")
    def test_wait_failure(self, mock_connector_class):
        mock_connector_class.return_value.wait.return_value = CompletionResult.failure("QUOTA_EXCEEDED")

        result = CliRunner().invoke(cli, ["wait", "op-1", "--project", "p"])

        assert result.exit_code == EXIT_FAILURE

    @patch("gce_operation_tracker.cli.ComputeConnector")
    def test_wait_timeout(self, mock_connector_class):
        mock_connector_class.return_value.wait.side_effect = OperationTimeoutError("op-1", 1000)

        result = CliRunner().invoke(cli, ["wait", "op-1", "--project", "p", "--timeout-millis", "1000"])

        assert result.exit_code == EXIT_TIMEOUT

    def test_zone_and_region_are_exclusive(self):
        result = CliRunner().invoke(cli, ["wait", "op-1", "--zone", "a", "--region", "b"])

        assert result.exit_code == 2
        assert "mutually exclusive" in result.output

    @patch("gce_operation_tracker.cli.ComputeConnector")
    def test_timeout_exit_code_differs_from_usage_error(self, mock_connector_class):
        mock_connector_class.return_value.wait.side_effect = OperationTimeoutError("op-1", 1000)

        timed_out = CliRunner().invoke(cli, ["wait", "op-1", "--project", "p"])
        bad_usage = CliRunner().invoke(cli, ["wait", "op-1", "--zone", "a", "--region", "b"])

        assert timed_out.exit_code == EXIT_TIMEOUT
        assert bad_usage.exit_code == 2
        assert EXIT_TIMEOUT not in (2, EXIT_FAILURE)

    @pytest.mark.parametrize("timeout_millis", ["0", "-5"])
    @patch("gce_operation_tracker.cli.ComputeConnector")
    def test_non_positive_timeout_is_a_usage_error(self, mock_connector_class, timeout_millis):
        result = CliRunner().invoke(cli, ["wait", "op-1", "--project", "p", "--timeout-millis", timeout_millis])

        assert result.exit_code == 2
        mock_connector_class.return_value.wait.assert_not_called()
