import time

from gce_operation_tracker.ComputeResource import ComputeResource
from gce_operation_tracker.exceptions import OperationFailedError


class InstanceResource(ComputeResource):
    KIND = "instance"

    def __init__(self, project, compute, service_logger, zone, poller=None, retry_delay_seconds=60, sleep=time.sleep):
        super().__init__(project, compute, service_logger, poller)
        self.zone = zone
        self.retry_delay_seconds = retry_delay_seconds
        self.sleep = sleep

    def insert_request(self, body):
        return self.client.instances().insert(project=self.project, zone=self.zone, body=body)

    def get_request(self, name):
        return self.client.instances().get(project=self.project, zone=self.zone, instance=name)

    def patch_request(self, name, body):
        return self.client.instances().update(project=self.project, zone=self.zone, instance=name, body=body)

    def delete_request(self, name):
        return self.client.instances().delete(project=self.project, zone=self.zone, instance=name)

    def create_with_retries(self, body, max_retries=3):
        for attempt in range(max_retries):
            try:
                return self.create(body)
            except OperationFailedError as e:
                if not e.is_resource_pool_exhausted or attempt == max_retries - 1:
                    raise
                self.service_logger.info(
                    f"Resources not available. Retrying in {self.retry_delay_seconds} seconds... [Trial: {attempt + 1}]"
                )
                self.sleep(self.retry_delay_seconds)

    def start(self, name):
        self.service_logger.info(f"Starting instance: {name}")
        self.execute_and_wait(self.client.instances().start(project=self.project, zone=self.zone, instance=name))

    def stop(self, name):
        self.service_logger.info(f"Stopping instance: {name}")
        self.execute_and_wait(self.client.instances().stop(project=self.project, zone=self.zone, instance=name))

    def is_running(self, name) -> bool:
        instance = self.read(name)
        return bool(instance) and instance.get("status") == "RUNNING"
