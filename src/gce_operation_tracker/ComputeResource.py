import logging
from abc import ABC, abstractmethod
from typing import Optional

from googleapiclient.errors import HttpError

from gce_operation_tracker.CompletionResult import CompletionKind, CompletionResult
from gce_operation_tracker.DiscoveryOperationRefresher import DiscoveryOperationRefresher, is_not_found
from gce_operation_tracker.OperationPoller import OperationPoller
from gce_operation_tracker.OperationReference import OperationReference
from gce_operation_tracker.OperationRefresher import OperationRefresher
from gce_operation_tracker.configuration import DEFAULT_TIMEOUT_MILLIS
from gce_operation_tracker.exceptions import OperationFailedError


class ComputeResource(ABC):
    """Create/read/update/delete for one Compute Engine resource type.

    Subclasses only build the discovery requests. Every mutating request
    returns an operation which is waited on here before the call returns.
    """

    KIND = "resource"
    TIMEOUT_MILLIS = DEFAULT_TIMEOUT_MILLIS

    def __init__(self, project, client, service_logger: logging.Logger, poller: OperationPoller = None):
        self.project = project
        self.client = client
        self.service_logger = service_logger
        self.poller = poller or OperationPoller(self.create_refresher(), service_logger)

    def create_refresher(self) -> OperationRefresher:
        return DiscoveryOperationRefresher(self.project, self.client)

    @abstractmethod
    def insert_request(self, body: dict):
        pass

    @abstractmethod
    def get_request(self, name: str):
        pass

    @abstractmethod
    def delete_request(self, name: str):
        pass

    def patch_request(self, name: str, body: dict):
        raise NotImplementedError(f"{self.KIND} '{name}' cannot be updated in place")

    def wait_for_completion(self, operation: dict, timeout_millis: int = None) -> CompletionResult:
        reference = OperationReference.from_response(operation)
        if timeout_millis is None:
            timeout_millis = self.TIMEOUT_MILLIS
        result = self.poller.wait_for_completion(reference, timeout_millis)

        if result.is_failure:
            raise OperationFailedError(result.message, result.codes)
        if result.kind is CompletionKind.UNKNOWN:
            self.service_logger.warning(f"Could not confirm {reference.operation_type or 'operation'} on {self.KIND}")
        return result

    def execute_and_wait(self, request, timeout_millis: int = None) -> CompletionResult:
        return self.wait_for_completion(request.execute(), timeout_millis)

    def create(self, body: dict) -> Optional[dict]:
        self.service_logger.info(f"Creating {self.KIND}: {body['name']}")
        self.execute_and_wait(self.insert_request(body))
        return self.read(body["name"])

    def read(self, name: str) -> Optional[dict]:
        try:
            return self.get_request(name).execute()
        except HttpError as e:
            if is_not_found(e):
                return None
            raise

    def exists(self, name: str) -> bool:
        if self.read(name):
            self.service_logger.info(f"{self.KIND.capitalize()} '{name}' already exists.")
            return True
        self.service_logger.info(f"{self.KIND.capitalize()} '{name}' does not exist.")
        return False

    def update(self, name: str, body: dict) -> Optional[dict]:
        self.service_logger.info(f"Updating {self.KIND}: {name}")
        self.execute_and_wait(self.patch_request(name, body))
        return self.read(name)

    def delete(self, name: str):
        self.service_logger.info(f"Deleting {self.KIND}: {name}")
        try:
            operation = self.delete_request(name).execute()
        except HttpError as e:
            if is_not_found(e):
                self.service_logger.info(f"{self.KIND.capitalize()} '{name}' was already deleted.")
                return
            raise
        self.wait_for_completion(operation)
