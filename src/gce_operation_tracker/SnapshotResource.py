from gce_operation_tracker.ComputeResource import ComputeResource


class SnapshotResource(ComputeResource):
    """Snapshots are global, but are taken from a zonal disk."""

    KIND = "snapshot"

    def insert_request(self, body):
        return self.client.snapshots().insert(project=self.project, body=body)

    def get_request(self, name):
        return self.client.snapshots().get(project=self.project, snapshot=name)

    def delete_request(self, name):
        return self.client.snapshots().delete(project=self.project, snapshot=name)

    def create_from_disk(self, zone, disk_name, snapshot_name):
        self.service_logger.info(f"Creating snapshot: {snapshot_name} from disk {disk_name}")
        request = self.client.disks().createSnapshot(
            project=self.project, zone=zone, disk=disk_name, body={"name": snapshot_name}
        )
        self.execute_and_wait(request)
        return self.read(snapshot_name)

    def prepare_snapshot(self, zone, disk_name, snapshot_name):
        if not self.exists(snapshot_name):
            self.create_from_disk(zone, disk_name, snapshot_name)
        else:
            self.service_logger.info(f"Using existing snapshot: {snapshot_name}")
