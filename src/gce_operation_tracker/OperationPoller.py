import logging
import time
from threading import Event
from typing import Callable, Optional

from gce_operation_tracker.CompletionResult import CompletionResult
from gce_operation_tracker.OperationReference import OperationReference
from gce_operation_tracker.OperationRefresher import OperationRefresher
from gce_operation_tracker.configuration import POLL_INTERVAL_MILLIS
from gce_operation_tracker.exceptions import OperationTimeoutError
from gce_operation_tracker.resolve_completion import resolve_completion


class OperationPoller:
    """Blocks until an operation is DONE, vanishes, is cancelled or times out.

    The wait is a fixed-interval sleep followed by a refresh from the
    operation's scoped endpoint. Sleeping and the clock are injectable so the
    loop can be driven without real time passing.
    """

    def __init__(
        self,
        refresher: OperationRefresher,
        service_logger: logging.Logger = None,
        poll_interval_millis: int = POLL_INTERVAL_MILLIS,
        sleep: Optional[Callable[[float], None]] = None,
        clock: Optional[Callable[[], float]] = None,
    ):
        self.refresher = refresher
        self.service_logger = service_logger or logging.getLogger(__name__)
        self.poll_interval_millis = poll_interval_millis
        self.sleep = sleep or time.sleep
        self.clock = clock or time.monotonic

    def pause(self, cancel_event: Optional[Event]) -> bool:
        seconds = self.poll_interval_millis / 1000
        if cancel_event is None:
            self.sleep(seconds)
            return False
        return cancel_event.wait(seconds)

    def wait_for_completion(
        self, operation: OperationReference, timeout_millis: int, cancel_event: Optional[Event] = None
    ) -> CompletionResult:
        if isinstance(timeout_millis, bool) or not isinstance(timeout_millis, int) or timeout_millis <= 0:
            raise ValueError(f"timeout_millis must be a positive integer, got {timeout_millis!r}")

        if not operation.is_done:
            self.service_logger.info(f"Waiting for operation {operation.name} to finish...")

        start = self.clock()
        while not operation.is_done:
            if self.pause(cancel_event):
                self.service_logger.info(f"Stopped waiting for operation {operation.name}: cancelled")
                return CompletionResult.cancelled(operation)

            elapsed_millis = (self.clock() - start) * 1000
            if elapsed_millis >= timeout_millis:
                self.service_logger.error(f"Operation {operation.name} timed out after {timeout_millis} ms")
                raise OperationTimeoutError(operation.name, timeout_millis)

            refresh = self.refresher.refresh(operation)
            if refresh.not_found:
                self.service_logger.warning(
                    f"Operation {operation.name} is no longer retrievable. Assuming it has finished."
                )
                return CompletionResult.unknown(operation)

            operation = operation.refreshed(refresh.response)

        result = resolve_completion(operation)
        if result.is_failure:
            self.service_logger.info(f"Error in operation {operation.name}: {result.message}")
        else:
            self.service_logger.info(f"Operation {operation.name} completed.")
        return result
