# usergraph/api/utils/logger.py
import json
import sys
from datetime import datetime, timezone

from usergraph.api import settings

def write_log(entry: dict, stream: str = "default", out=None):
    """
    Emit one JSON line per event. Keys given in `entry` win over the
    stamped "timestamp" and "stream". Lines go to stderr unless `out`
    is given, so the CLI's stdout only ever holds the query result.
    """
    if not settings.LOG_EVENTS:
        return
    record = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "stream": stream,
        **entry
    }
    (out or sys.stderr).write(json.dumps(record, ensure_ascii=False, default=str) + "\n")

def log_lookup(user_id, found: bool):
    write_log({
        "event": "user_lookup",
        "user_id": user_id,
        "found": found
    }, stream="resolver")

def log_execution(operation_name, success: bool, errors=None):
    write_log({
        "event": "query_executed",
        "operation": operation_name,
        "success": success,
        "error_count": len(errors or [])
    }, stream="engine")
