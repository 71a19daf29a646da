import os

# Service metadata
APP_TITLE = "TRT Dosage API"
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")

# Logging / observability
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOGFIRE_SERVICE_NAME = os.getenv("LOGFIRE_SERVICE_NAME", "trt-dosage-api")
LOGFIRE_CONSOLE = os.getenv("LOGFIRE_CONSOLE", "true").lower() == "true"


def _send_to_logfire(raw: str):
    """Map LOGFIRE_SEND_TO_LOGFIRE onto the values logfire.configure accepts."""
    value = raw.strip().lower()
    if value == "true":
        return True
    if value == "false":
        return False
    return "if-token-present"


LOGFIRE_SEND_TO_LOGFIRE = _send_to_logfire(os.getenv("LOGFIRE_SEND_TO_LOGFIRE", "if-token-present"))

# CORS
CORS_ALLOW_ORIGIN = os.getenv("CORS_ALLOW_ORIGIN", "*")
CORS_HEADERS = {
    "Access-Control-Allow-Origin": CORS_ALLOW_ORIGIN,
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8787"))
