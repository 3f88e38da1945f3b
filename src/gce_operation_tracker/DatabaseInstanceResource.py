from gce_operation_tracker.ComputeResource import ComputeResource
from gce_operation_tracker.SqlAdminOperationRefresher import SqlAdminOperationRefresher
from gce_operation_tracker.configuration import LONG_OPERATION_TIMEOUT_MILLIS


class DatabaseInstanceResource(ComputeResource):
    """Cloud SQL instance. Its operations are tracked through the SQL Admin API."""

    KIND = "database instance"
    TIMEOUT_MILLIS = LONG_OPERATION_TIMEOUT_MILLIS

    def create_refresher(self):
        return SqlAdminOperationRefresher(self.project, self.client)

    def insert_request(self, body):
        return self.client.instances().insert(project=self.project, body=body)

    def get_request(self, name):
        return self.client.instances().get(project=self.project, instance=name)

    def patch_request(self, name, body):
        return self.client.instances().patch(project=self.project, instance=name, body=body)

    def delete_request(self, name):
        return self.client.instances().delete(project=self.project, instance=name)
