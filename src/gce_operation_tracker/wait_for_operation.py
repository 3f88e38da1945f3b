import logging
from typing import Optional

from gce_operation_tracker.CompletionResult import CompletionKind, CompletionResult
from gce_operation_tracker.ComputeV1OperationRefresher import ComputeV1OperationRefresher
from gce_operation_tracker.DiscoveryOperationRefresher import DiscoveryOperationRefresher
from gce_operation_tracker.OperationPoller import OperationPoller
from gce_operation_tracker.OperationReference import OperationReference
from gce_operation_tracker.configuration import DEFAULT_TIMEOUT_MILLIS


def failure_message(result: CompletionResult, service_logger: logging.Logger) -> Optional[str]:
    if result.kind is CompletionKind.UNKNOWN:
        service_logger.warning(f"Outcome of operation {result.operation.name} could not be confirmed")
    return result.message if result.is_failure else None


def wait_for_operation(
    project, compute, operation: dict, service_logger: logging.Logger, timeout_millis: int = DEFAULT_TIMEOUT_MILLIS
) -> Optional[str]:
    poller = OperationPoller(DiscoveryOperationRefresher(project, compute), service_logger)
    result = poller.wait_for_completion(OperationReference.from_response(operation), timeout_millis)
    return failure_message(result, service_logger)


def wait_for_compute_v1_operation(
    project, operation, service_logger: logging.Logger, timeout_millis: int = DEFAULT_TIMEOUT_MILLIS
) -> Optional[str]:
    poller = OperationPoller(ComputeV1OperationRefresher(project), service_logger)
    result = poller.wait_for_completion(OperationReference.from_compute_v1(operation), timeout_millis)
    return failure_message(result, service_logger)
