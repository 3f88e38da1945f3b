from gce_operation_tracker.ComputeResource import ComputeResource


class AddressResource(ComputeResource):
    KIND = "address"

    def __init__(self, project, compute, service_logger, region, poller=None):
        super().__init__(project, compute, service_logger, poller)
        self.region = region

    def insert_request(self, body):
        return self.client.addresses().insert(project=self.project, region=self.region, body=body)

    def get_request(self, name):
        return self.client.addresses().get(project=self.project, region=self.region, address=name)

    def delete_request(self, name):
        return self.client.addresses().delete(project=self.project, region=self.region, address=name)
