import logging

from googleapiclient import discovery

from gce_operation_tracker.AddressResource import AddressResource
from gce_operation_tracker.CompletionResult import CompletionResult
from gce_operation_tracker.DatabaseInstanceResource import DatabaseInstanceResource
from gce_operation_tracker.DiscoveryOperationRefresher import DiscoveryOperationRefresher
from gce_operation_tracker.DiskResource import DiskResource
from gce_operation_tracker.FirewallResource import FirewallResource
from gce_operation_tracker.InstanceGroupManagerResource import InstanceGroupManagerResource
from gce_operation_tracker.InstanceResource import InstanceResource
from gce_operation_tracker.OperationPoller import OperationPoller
from gce_operation_tracker.OperationReference import OperationReference
from gce_operation_tracker.SnapshotResource import SnapshotResource
from gce_operation_tracker.configuration import DEFAULT_TIMEOUT_MILLIS, LOG_FORMAT, PROJECT_ID


class ComputeConnector:

    def __init__(self, project=None, service_logger=None, compute=None, sqladmin=None):
        self.project = project or PROJECT_ID
        if not self.project:
            raise ValueError("No project configured. Set PROJECT_ID or pass a project.")

        self.service_logger = service_logger or self.initialize_logger()
        self._compute = compute
        self._sqladmin = sqladmin

    @staticmethod
    def initialize_logger() -> logging.Logger:
        handlers = [logging.StreamHandler()]
        logging.root.handlers = []
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, handlers=handlers)
        return logging.getLogger()

    @property
    def compute(self):
        if self._compute is None:
            self._compute = discovery.build("compute", "v1")
        return self._compute

    @property
    def sqladmin(self):
        if self._sqladmin is None:
            self._sqladmin = discovery.build("sqladmin", "v1beta4")
        return self._sqladmin

    def poller(self) -> OperationPoller:
        return OperationPoller(DiscoveryOperationRefresher(self.project, self.compute), self.service_logger)

    def wait(self, operation_name, zone=None, region=None, timeout_millis=DEFAULT_TIMEOUT_MILLIS) -> CompletionResult:
        operation = OperationReference.from_response({"name": operation_name, "zone": zone, "region": region})
        return self.poller().wait_for_completion(operation, timeout_millis)

    def disks(self, zone) -> DiskResource:
        return DiskResource(self.project, self.compute, self.service_logger, zone)

    def snapshots(self) -> SnapshotResource:
        return SnapshotResource(self.project, self.compute, self.service_logger)

    def instances(self, zone) -> InstanceResource:
        return InstanceResource(self.project, self.compute, self.service_logger, zone)

    def addresses(self, region) -> AddressResource:
        return AddressResource(self.project, self.compute, self.service_logger, region)

    def firewalls(self) -> FirewallResource:
        return FirewallResource(self.project, self.compute, self.service_logger)

    def instance_group_managers(self, zone) -> InstanceGroupManagerResource:
        return InstanceGroupManagerResource(self.project, self.compute, self.service_logger, zone)

    def database_instances(self) -> DatabaseInstanceResource:
        return DatabaseInstanceResource(self.project, self.sqladmin, self.service_logger)
