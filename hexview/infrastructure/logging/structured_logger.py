"""Logger that carries cell context and timing data on its records."""

import logging
import sys
import traceback
from datetime import datetime, timezone
from typing import Dict, Optional

# Record attributes the formatters know how to render
CONTEXT_KEYS = ('operation', 'cell', 'resolution')


class StructuredLogger(logging.Logger):
    """
    Logger whose records always expose ``context``, ``performance`` and
    ``traceback`` attributes.
    
    Callers pass cell details through ``extra={'context': {...}}``, e.g.
    ``{'cell': '8a2a1072b59ffff', 'resolution': 10}``, and timing data
    through ``extra={'performance': {...}}`` or :meth:`log_performance`.
    """
    
    def _log(self, level, msg, args, exc_info=None, extra=None, stack_info=False, **kwargs):
        fields = dict(extra or {})
        context = dict(fields.pop('context', None) or {})
        performance = fields.pop('performance', None)
        
        tb: Optional[str] = None
        if exc_info:
            if isinstance(exc_info, BaseException):
                exc_info = (type(exc_info), exc_info, exc_info.__traceback__)
            elif not isinstance(exc_info, tuple):
                exc_info = sys.exc_info()
            if exc_info[0] is not None:
                tb = "".join(traceback.format_exception(*exc_info))
        
        fields.update(context=context, performance=performance, traceback=tb)
        super()._log(level, msg, args, exc_info=None, extra=fields,
                     stack_info=stack_info, **kwargs)
    
    def log_performance(self, operation: str, duration: float, level: int = logging.INFO, **metrics):
        """
        Record how long ``operation`` took.
        
        ``items_processed`` in ``metrics`` adds an items-per-second rate;
        ``resolution`` and ``cell`` are also copied into the record context.
        """
        performance = {
            'operation': operation,
            'duration_seconds': round(duration, 6),
            'timestamp': datetime.now(timezone.utc).isoformat(),
            **metrics
        }
        if duration > 0 and metrics.get('items_processed'):
            performance['items_per_second'] = round(metrics['items_processed'] / duration, 2)
        
        context = {'operation': operation}
        context.update({key: metrics[key] for key in CONTEXT_KEYS if key in metrics})
        
        self.log(
            level,
            f"{operation} took {duration * 1000:.2f}ms",
            extra={'context': context, 'performance': performance}
        )


_loggers: Dict[str, StructuredLogger] = {}


def get_logger(name: str) -> StructuredLogger:
    """Return the StructuredLogger registered under ``name``."""
    if name not in _loggers:
        previous = logging.getLoggerClass()
        logging.setLoggerClass(StructuredLogger)
        try:
            _loggers[name] = logging.getLogger(name)
        finally:
            logging.setLoggerClass(previous)
    return _loggers[name]
