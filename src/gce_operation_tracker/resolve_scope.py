from typing import Optional

from gce_operation_tracker.OperationScope import OperationScope


def last_path_segment(url: str) -> str:
    return url.split("/")[-1]


def resolve_scope(operation: dict) -> tuple[OperationScope, Optional[str]]:
    """Zone wins over region; an operation carrying neither is global."""
    if operation.get("zone"):
        return OperationScope.ZONAL, last_path_segment(operation["zone"])
    if operation.get("region"):
        return OperationScope.REGIONAL, last_path_segment(operation["region"])
    return OperationScope.GLOBAL, None
