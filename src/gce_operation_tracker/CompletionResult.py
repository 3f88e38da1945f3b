from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from gce_operation_tracker.OperationReference import OperationReference


class CompletionKind(Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    UNKNOWN = "unknown"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class CompletionResult:
    kind: CompletionKind
    operation: Optional[OperationReference] = None
    message: Optional[str] = None
    codes: list[str] = field(default_factory=list)

    @property
    def is_failure(self) -> bool:
        return self.kind is CompletionKind.FAILURE

    @staticmethod
    def success(operation: OperationReference = None) -> "CompletionResult":
        return CompletionResult(CompletionKind.SUCCESS, operation)

    @staticmethod
    def failure(message: str, codes: list[str] = None, operation: OperationReference = None) -> "CompletionResult":
        return CompletionResult(CompletionKind.FAILURE, operation, message, list(codes or []))

    @staticmethod
    def unknown(operation: OperationReference = None) -> "CompletionResult":
        return CompletionResult(CompletionKind.UNKNOWN, operation)

    @staticmethod
    def cancelled(operation: OperationReference = None) -> "CompletionResult":
        return CompletionResult(CompletionKind.CANCELLED, operation)
