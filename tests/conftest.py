import copy
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

# Shape of a real ?recursive=true response, trimmed to a single NIC and disk
SAMPLE_METADATA = {
    "instance": {
        "attributes": {"startup-script": "#!/bin/bash\necho hello"},
        "cpuPlatform": "Intel Broadwell",
        "description": "test vm",
        "disks": [
            {
                "deviceName": "boot-disk",
                "index": 0,
                "mode": "READ_WRITE",
                "type": "PERSISTENT",
            }
        ],
        "hostname": "vm1.us-central1-a.c.myproj.internal",
        "id": 18446744073709551557,
        "image": "projects/debian-cloud/global/images/debian-12-bookworm-v20240110",
        "machineType": "projects/123456789/machineTypes/n1-standard-1",
        "maintenanceEvent": "NONE",
        "networkInterfaces": [
            {
                "accessConfigs": [
                    {"externalIp": "34.1.2.3", "type": "ONE_TO_ONE_NAT"}
                ],
                "forwardedIps": [],
                "ip": "10.128.0.2",
                "network": "projects/123456789/networks/default",
            }
        ],
        "scheduling": {
            "automaticRestart": "TRUE",
            "onHostMaintenance": "MIGRATE",
        },
        "tags": ["http-server", "https-server"],
        "zone": "projects/123456789/zones/us-central1-a",
    },
    "project": {
        "attributes": {"enable-oslogin": "TRUE"},
        "numericProjectId": 123456789,
        "projectId": "myproj",
    },
}


@pytest.fixture
def metadata_payload():
    return copy.deepcopy(SAMPLE_METADATA)


class _StubMetadataHandler(BaseHTTPRequestHandler):
    def do_GET(self):
        self.server.seen.append(
            {"path": self.path, "flavor": self.headers.get("Metadata-Flavor")}
        )
        status, content_type, body = self.server.reply
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass


@pytest.fixture
def stub_server():
    """Local stand-in for metadata.google.internal on an ephemeral port."""
    server = ThreadingHTTPServer(("127.0.0.1", 0), _StubMetadataHandler)
    server.seen = []
    server.reply = (200, "application/json", b"{}")
    server.url = (
        f"http://127.0.0.1:{server.server_address[1]}/computeMetadata/v1/?recursive=true"
    )

    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield server
    server.shutdown()
    server.server_close()
