from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from gce_operation_tracker.OperationReference import OperationReference


@dataclass(frozen=True)
class RefreshResult:
    response: Optional[dict] = None
    not_found: bool = False

    @staticmethod
    def found(response: dict) -> "RefreshResult":
        return RefreshResult(response=response)

    @staticmethod
    def missing() -> "RefreshResult":
        return RefreshResult(not_found=True)


class OperationRefresher(ABC):
    """Fetches the latest state of an operation from its scoped endpoint.

    A vanished operation record comes back as ``RefreshResult.missing()``.
    Any other client error is raised to the caller.
    """

    def __init__(self, project: str):
        self.project = project

    @abstractmethod
    def refresh(self, operation: OperationReference) -> RefreshResult:
        pass
