"""Single-line console formatter."""

import logging
from datetime import datetime
from typing import Dict


class HumanFormatter(logging.Formatter):
    """
    ``time LEVEL [logger] [op | res | cell] message`` with optional ANSI
    colour per level and a timing suffix for performance records.
    """
    
    LEVEL_COLORS = {
        logging.DEBUG: '\033[36m',
        logging.WARNING: '\033[93m',
        logging.ERROR: '\033[91m',
        logging.CRITICAL: '\033[95m',
    }
    RESET = '\033[0m'
    
    def __init__(self, use_colors: bool = True, show_context: bool = True):
        super().__init__()
        self.use_colors = use_colors
        self.show_context = show_context
    
    def _paint(self, text: str, levelno: int) -> str:
        color = self.LEVEL_COLORS.get(levelno) if self.use_colors else None
        return f"{color}{text}{self.RESET}" if color else text
    
    def format(self, record: logging.LogRecord) -> str:
        pieces = [
            datetime.fromtimestamp(record.created).strftime('%H:%M:%S'),
            self._paint(f"{record.levelname:8}", record.levelno),
            f"[{record.name.rsplit('.', 1)[-1]}]",
        ]
        
        if self.show_context:
            context = self._describe_context(getattr(record, 'context', None) or {})
            if context:
                pieces.append(context)
        
        pieces.append(record.getMessage())
        line = ' '.join(pieces)
        
        performance = getattr(record, 'performance', None)
        if performance:
            timing = self._describe_performance(performance)
            if timing:
                line += f" ({timing})"
        
        tb = getattr(record, 'traceback', None)
        if tb is None and record.exc_info:
            tb = self.formatException(record.exc_info)
        if tb:
            line += '\n' + self._paint(tb.rstrip(), record.levelno)
        
        return line
    
    def _describe_context(self, context: Dict) -> str:
        parts = []
        if context.get('operation'):
            parts.append(f"op:{context['operation']}")
        if context.get('resolution') is not None:
            parts.append(f"res:{context['resolution']}")
        if context.get('cell'):
            parts.append(f"cell:{context['cell']}")
        return f"[{' | '.join(parts)}]" if parts else ''
    
    def _describe_performance(self, performance: Dict) -> str:
        parts = []
        if 'items_per_second' in performance:
            parts.append(f"{performance['items_per_second']:.1f} samples/s")
        if 'cells' in performance:
            parts.append(f"{performance['cells']} cells")
        if performance.get('skipped'):
            parts.append(f"{performance['skipped']} skipped")
        return ', '.join(parts)
