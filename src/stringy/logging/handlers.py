"""JSON log formatter for stringy.

Records are written one JSON object per line. The operation being
dispatched, when there is one, is a top-level field next to the level and
message so that log lines can be grouped by operation without digging into
the free-form context.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

# Attributes every LogRecord carries, plus those added by Formatter and by
# OperationContextFilter; anything else came from extra={...}
_RECORD_ATTRS: frozenset[str] = frozenset(vars(logging.makeLogRecord({}))) | {
    "message",
    "asctime",
    "operation",
    "encoding",
    "operation_tag",
}


class JSONFormatter(logging.Formatter):
    """Format log records as JSON objects.

    Fields, in order:
    - timestamp: ISO-8601 UTC time the record was created
    - level, message
    - logger: omitted for the root logger
    - operation, encoding: set while an operation is dispatched
    - context: values passed through extra={...}
    - exception: formatted traceback
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
        }
        if record.name != "root":
            entry["logger"] = record.name

        for field in ("operation", "encoding"):
            value = getattr(record, field, None)
            if value:
                entry[field] = value

        context = {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        }
        if context:
            entry["context"] = context

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        # Subjects are Unicode text; keep them readable in the log
        return json.dumps(entry, default=str, ensure_ascii=False)
