import json
from datetime import datetime

LOG_FILE = "log.json"

EVENT_TYPES = ("INFO", "WARNING", "ERROR", "SUCCESS")


def set_log_file(path):
    """Send subsequent events to another JSON-lines file."""
    global LOG_FILE
    LOG_FILE = str(path)


def log_event(event_type: str, message: str, extra: dict = None):
    """
    Append one event to the JSON-lines log. A failed write is reported on
    stdout and never interrupts article generation.
    """
    if event_type not in EVENT_TYPES:
        raise ValueError(f"Unknown event type: {event_type}")

    entry = {
        "time": datetime.now().isoformat(),
        "type": event_type,
        "message": message
    }
    if extra:
        entry["extra"] = extra

    try:
        with open(LOG_FILE, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry, default=str) + "\n")
    except OSError as e:
        print(f"Log write error: {e}")
