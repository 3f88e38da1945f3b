from gce_operation_tracker.ComputeResource import ComputeResource


class FirewallResource(ComputeResource):
    KIND = "firewall"

    def insert_request(self, body):
        return self.client.firewalls().insert(project=self.project, body=body)

    def get_request(self, name):
        return self.client.firewalls().get(project=self.project, firewall=name)

    def patch_request(self, name, body):
        return self.client.firewalls().patch(project=self.project, firewall=name, body=body)

    def delete_request(self, name):
        return self.client.firewalls().delete(project=self.project, firewall=name)
