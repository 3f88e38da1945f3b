from dataclasses import dataclass, replace
from typing import Optional

from gce_operation_tracker.OperationScope import OperationScope
from gce_operation_tracker.OperationStatus import OperationStatus
from gce_operation_tracker.resolve_scope import resolve_scope


@dataclass(frozen=True)
class OperationReference:
    """Local handle to an in-flight Compute Engine operation.

    The scope decides which operations endpoint is polled. It is fixed when
    the reference is built from the mutating call's response and survives
    every refresh.
    """

    name: str
    scope: OperationScope = OperationScope.GLOBAL
    scope_location: Optional[str] = None
    status: OperationStatus = OperationStatus.PENDING
    error: Optional[dict] = None
    id: Optional[str] = None
    operation_type: Optional[str] = None

    def __post_init__(self):
        if not self.name:
            raise ValueError("Operation reference requires a name")
        if self.scope is OperationScope.GLOBAL and self.scope_location is not None:
            raise ValueError(f"Global operation {self.name} cannot carry a location")
        if self.scope is not OperationScope.GLOBAL and not self.scope_location:
            raise ValueError(f"{self.scope.name.capitalize()} operation {self.name} requires a location")

    @property
    def is_done(self) -> bool:
        return self.status.is_terminal

    @staticmethod
    def from_response(response: dict) -> "OperationReference":
        scope, scope_location = resolve_scope(response)
        return OperationReference(
            name=response.get("name", ""),
            scope=scope,
            scope_location=scope_location,
            status=OperationStatus.parse(response.get("status")),
            error=response.get("error") or None,
            id=response.get("id"),
            operation_type=response.get("operationType"),
        )

    @staticmethod
    def from_compute_v1(operation) -> "OperationReference":
        return OperationReference.from_response(compute_v1_operation_to_dict(operation))

    def refreshed(self, response: dict) -> "OperationReference":
        if self.is_done:
            return self
        return replace(
            self,
            status=OperationStatus.parse(response.get("status")),
            error=response.get("error") or None,
        )


def compute_v1_operation_to_dict(operation) -> dict:
    errors = []
    if operation.error and operation.error.errors:
        errors = [{"code": error.code, "message": error.message} for error in operation.error.errors]

    response = {
        "name": operation.name,
        "status": OperationStatus.parse(operation.status).value,
        "zone": operation.zone or None,
        "region": operation.region or None,
        "operationType": operation.operation_type or None,
        "id": str(operation.id) if operation.id else None,
    }
    if errors:
        response["error"] = {"errors": errors}
    return response
