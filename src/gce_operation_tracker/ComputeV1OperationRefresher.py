from google.api_core.exceptions import NotFound
from google.cloud import compute_v1

from gce_operation_tracker.OperationReference import OperationReference, compute_v1_operation_to_dict
from gce_operation_tracker.OperationRefresher import OperationRefresher, RefreshResult
from gce_operation_tracker.OperationScope import OperationScope


class ComputeV1OperationRefresher(OperationRefresher):
    """Refresher backed by the google-cloud-compute operations clients."""

    def __init__(self, project: str, zone_client=None, region_client=None, global_client=None):
        super().__init__(project)
        self._zone_client = zone_client
        self._region_client = region_client
        self._global_client = global_client

    @property
    def zone_client(self) -> compute_v1.ZoneOperationsClient:
        if self._zone_client is None:
            self._zone_client = compute_v1.ZoneOperationsClient()
        return self._zone_client

    @property
    def region_client(self) -> compute_v1.RegionOperationsClient:
        if self._region_client is None:
            self._region_client = compute_v1.RegionOperationsClient()
        return self._region_client

    @property
    def global_client(self) -> compute_v1.GlobalOperationsClient:
        if self._global_client is None:
            self._global_client = compute_v1.GlobalOperationsClient()
        return self._global_client

    def fetch(self, operation: OperationReference):
        if operation.scope is OperationScope.ZONAL:
            return self.zone_client.get(project=self.project, zone=operation.scope_location, operation=operation.name)
        if operation.scope is OperationScope.REGIONAL:
            return self.region_client.get(
                project=self.project, region=operation.scope_location, operation=operation.name
            )
        return self.global_client.get(project=self.project, operation=operation.name)

    def refresh(self, operation: OperationReference) -> RefreshResult:
        try:
            return RefreshResult.found(compute_v1_operation_to_dict(self.fetch(operation)))
        except NotFound:
            return RefreshResult.missing()
