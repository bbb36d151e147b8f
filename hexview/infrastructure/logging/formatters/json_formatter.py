"""One JSON object per line, for log files."""

import json
import logging
from datetime import datetime, timezone

from ..structured_logger import CONTEXT_KEYS


class JsonFormatter(logging.Formatter):
    """
    Serialize records as single-line JSON.
    
    ``operation``, ``cell`` and ``resolution`` from the record context are
    promoted to top-level keys so log files can be filtered per cell or
    resolution without unpacking the context object.
    """
    
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            'timestamp': datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'location': f"{record.module}.{record.funcName}:{record.lineno}"
        }
        
        context = dict(getattr(record, 'context', None) or {})
        for key in CONTEXT_KEYS:
            if key in context:
                entry[key] = context.pop(key)
        if context:
            entry['context'] = context
        
        performance = getattr(record, 'performance', None)
        if performance:
            entry['performance'] = performance
        
        tb = getattr(record, 'traceback', None)
        if tb is None and record.exc_info:
            tb = self.formatException(record.exc_info)
        if tb:
            entry['traceback'] = tb
        
        return json.dumps(entry, separators=(',', ':'), default=str)
