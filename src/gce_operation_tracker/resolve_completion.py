import json

from gce_operation_tracker.CompletionResult import CompletionResult
from gce_operation_tracker.OperationReference import OperationReference


def dump_error(error: dict) -> str:
    return json.dumps(error, indent=2, sort_keys=True)


def describe_error_item(item: dict) -> str:
    return item.get("message") or item.get("code") or dump_error(item)


def format_operation_error(error: dict) -> str:
    if error.get("errors"):
        return "\n".join(describe_error_item(item) for item in error["errors"])
    if error.get("message"):
        return error["message"]
    return dump_error(error)


def error_codes(error: dict) -> list[str]:
    return [item["code"] for item in error.get("errors", []) if item.get("code")]


def resolve_completion(operation: OperationReference) -> CompletionResult:
    if not operation.is_done:
        raise ValueError(f"Operation {operation.name} is not finished. Status: {operation.status.value}")

    if not operation.error:
        return CompletionResult.success(operation)

    return CompletionResult.failure(format_operation_error(operation.error), error_codes(operation.error), operation)
