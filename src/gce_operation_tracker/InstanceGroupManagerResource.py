from gce_operation_tracker.ComputeResource import ComputeResource
from gce_operation_tracker.configuration import LONG_OPERATION_TIMEOUT_MILLIS


class InstanceGroupManagerResource(ComputeResource):
    """Managed instance group rollouts routinely outlast the default timeout."""

    KIND = "instance group manager"
    TIMEOUT_MILLIS = LONG_OPERATION_TIMEOUT_MILLIS

    def __init__(self, project, compute, service_logger, zone, poller=None):
        super().__init__(project, compute, service_logger, poller)
        self.zone = zone

    def insert_request(self, body):
        return self.client.instanceGroupManagers().insert(project=self.project, zone=self.zone, body=body)

    def get_request(self, name):
        return self.client.instanceGroupManagers().get(
            project=self.project, zone=self.zone, instanceGroupManager=name
        )

    def patch_request(self, name, body):
        return self.client.instanceGroupManagers().patch(
            project=self.project, zone=self.zone, instanceGroupManager=name, body=body
        )

    def delete_request(self, name):
        return self.client.instanceGroupManagers().delete(
            project=self.project, zone=self.zone, instanceGroupManager=name
        )

    def set_instance_template(self, name, instance_template_link):
        self.service_logger.info(f"Setting instance template of {name} to {instance_template_link}")
        request = self.client.instanceGroupManagers().setInstanceTemplate(
            project=self.project,
            zone=self.zone,
            instanceGroupManager=name,
            body={"instanceTemplate": instance_template_link},
        )
        self.execute_and_wait(request)
        return self.read(name)
