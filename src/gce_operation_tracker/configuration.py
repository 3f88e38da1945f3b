import json
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

CREDENTIALS_FILE = Path("/", "tmp", "credentials.json")


def export_service_account_credentials(credentials: str, target: Path = CREDENTIALS_FILE):
    """Writes inline service-account JSON to disk for the Google client libraries."""
    credentials = credentials.strip()
    if not credentials or os.getenv("GOOGLE_APPLICATION_CREDENTIALS"):
        return
    # some deploy tools hand the JSON over wrapped in an extra pair of quotes
    if len(credentials) > 1 and credentials[0] == credentials[-1] == '"':
        credentials = json.dumps(json.loads(credentials[1:-1]))
    target.write_text(credentials)
    os.environ["GOOGLE_APPLICATION_CREDENTIALS"] = str(target)


if os.getenv("CREDENTIALS_PATH"):
    os.environ["GOOGLE_APPLICATION_CREDENTIALS"] = os.environ["CREDENTIALS_PATH"]
export_service_account_credentials(os.getenv("CREDENTIALS", ""))

PROJECT_ID = os.getenv("PROJECT_ID", "")

DEFAULT_TIMEOUT_MILLIS = int(os.getenv("OPERATION_TIMEOUT_MILLIS", "60000"))
LONG_OPERATION_TIMEOUT_MILLIS = int(os.getenv("LONG_OPERATION_TIMEOUT_MILLIS", "300000"))
POLL_INTERVAL_MILLIS = int(os.getenv("OPERATION_POLL_INTERVAL_MILLIS", "1000"))

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
