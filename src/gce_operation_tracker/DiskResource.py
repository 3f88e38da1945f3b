from gce_operation_tracker.ComputeResource import ComputeResource


class DiskResource(ComputeResource):
    KIND = "disk"

    def __init__(self, project, compute, service_logger, zone, poller=None):
        super().__init__(project, compute, service_logger, poller)
        self.zone = zone

    def insert_request(self, body):
        return self.client.disks().insert(project=self.project, zone=self.zone, body=body)

    def get_request(self, name):
        return self.client.disks().get(project=self.project, zone=self.zone, disk=name)

    def delete_request(self, name):
        return self.client.disks().delete(project=self.project, zone=self.zone, disk=name)

    def create_from_snapshot(self, disk_name, snapshot_name, disk_type="pd-ssd"):
        self.service_logger.info(f"Creating new disk: {disk_name} in zone {self.zone} from snapshot {snapshot_name}")
        disk_body = {
            "name": disk_name,
            "sourceSnapshot": f"projects/{self.project}/global/snapshots/{snapshot_name}",
            "type": f"projects/{self.project}/zones/{self.zone}/diskTypes/{disk_type}",
        }
        return self.create(disk_body)

    def prepare_disk(self, disk_name, snapshot_name):
        if not self.exists(disk_name):
            self.create_from_snapshot(disk_name, snapshot_name)
        else:
            self.service_logger.info(f"Using existing disk: {disk_name}")

    def resize(self, disk_name, size_gb: int):
        self.service_logger.info(f"Resizing disk {disk_name} to {size_gb} GB")
        request = self.client.disks().resize(
            project=self.project, zone=self.zone, disk=disk_name, body={"sizeGb": str(size_gb)}
        )
        self.execute_and_wait(request)
        return self.read(disk_name)

    @staticmethod
    def get_boot_disk(instance):
        for disk in instance.get("disks", []):
            if disk.get("boot"):
                return disk["source"].split("/")[-1]
        raise ValueError("Boot disk not found.")
