import os
from pathlib import Path

HOST = "0.0.0.0"
PORT = 8080

READ_TIMEOUT_SECONDS = 10
WRITE_TIMEOUT_SECONDS = 10
SHUTDOWN_TIMEOUT_SECONDS = 5

# Simulated backing-store latency for GET /api/items.
LIST_LATENCY_SECONDS = 2

STATIC_DIR = Path(os.environ.get("CATALOG_STATIC_DIR", "static"))

LOG_LEVEL = os.environ.get("CATALOG_LOG_LEVEL", "INFO").upper()
