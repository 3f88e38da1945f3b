from googleapiclient.errors import HttpError

from gce_operation_tracker.OperationReference import OperationReference
from gce_operation_tracker.OperationRefresher import OperationRefresher, RefreshResult
from gce_operation_tracker.OperationScope import OperationScope


def is_not_found(error: HttpError) -> bool:
    return error.resp.status == 404


class DiscoveryOperationRefresher(OperationRefresher):
    def __init__(self, project: str, compute):
        super().__init__(project)
        self.compute = compute

    def get_request(self, operation: OperationReference):
        if operation.scope is OperationScope.ZONAL:
            return self.compute.zoneOperations().get(
                project=self.project, zone=operation.scope_location, operation=operation.name
            )
        if operation.scope is OperationScope.REGIONAL:
            return self.compute.regionOperations().get(
                project=self.project, region=operation.scope_location, operation=operation.name
            )
        return self.compute.globalOperations().get(project=self.project, operation=operation.name)

    def refresh(self, operation: OperationReference) -> RefreshResult:
        try:
            return RefreshResult.found(self.get_request(operation).execute())
        except HttpError as e:
            if is_not_found(e):
                return RefreshResult.missing()
            raise
