from enum import Enum


class OperationStatus(Enum):
    PENDING = "PENDING"
    RUNNING = "RUNNING"
    DONE = "DONE"
    UNSPECIFIED = "UNSPECIFIED"

    @property
    def is_terminal(self) -> bool:
        return self is OperationStatus.DONE

    @staticmethod
    def parse(value) -> "OperationStatus":
        if value is None or value == "":
            return OperationStatus.PENDING
        if isinstance(value, OperationStatus):
            return value
        # proto-plus enums expose the status through .name
        name = value if isinstance(value, str) else getattr(value, "name", str(value))
        try:
            return OperationStatus(name.upper())
        except ValueError:
            return OperationStatus.UNSPECIFIED
