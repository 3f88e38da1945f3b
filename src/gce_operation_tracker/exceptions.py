RESOURCE_POOL_EXHAUSTED_CODES = ("ZONE_RESOURCE_POOL_EXHAUSTED", "ZONE_RESOURCE_POOL_EXHAUSTED_WITH_DETAILS")


class OperationTimeoutError(TimeoutError):
    def __init__(self, operation_name: str, timeout_millis: int):
        super().__init__(f"Operation {operation_name} did not finish within {timeout_millis} ms")
        self.operation_name = operation_name
        self.timeout_millis = timeout_millis


class OperationFailedError(Exception):
    def __init__(self, message: str, codes: list[str] = None):
        super().__init__(message)
        self.message = message
        self.codes = list(codes or [])

    @property
    def is_resource_pool_exhausted(self) -> bool:
        return any(code in RESOURCE_POOL_EXHAUSTED_CODES for code in self.codes)
