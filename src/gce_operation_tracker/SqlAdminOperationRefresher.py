from googleapiclient.errors import HttpError

from gce_operation_tracker.DiscoveryOperationRefresher import is_not_found
from gce_operation_tracker.OperationReference import OperationReference
from gce_operation_tracker.OperationRefresher import OperationRefresher, RefreshResult


class SqlAdminOperationRefresher(OperationRefresher):
    """Cloud SQL Admin operations are project wide, so scope is ignored."""

    def __init__(self, project: str, sqladmin):
        super().__init__(project)
        self.sqladmin = sqladmin

    def refresh(self, operation: OperationReference) -> RefreshResult:
        try:
            response = self.sqladmin.operations().get(project=self.project, operation=operation.name).execute()
        except HttpError as e:
            if is_not_found(e):
                return RefreshResult.missing()
            raise
        return RefreshResult.found(response)
