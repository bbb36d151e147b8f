# hexview/config/defaults.py
"""Default configuration values."""

from pathlib import Path

# Project path
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

# Cell resolution settings
CELLS = {
    'cache': {
        'capacity': 100,             # entries, FIFO eviction
        'coordinate_precision': 6,   # decimal places, ~0.1 m at the equator
    },
    'enumeration': {
        'min_steps': 10,             # minimum samples per viewport axis
        'max_steps': 50,             # caps primitive calls at max_steps**2 (+ edges)
        'max_grid_resolution': 8,    # ceiling used when picking grid layer resolutions
    },
}

LOGGING = {
    'level': 'INFO',
    'file': None,                    # JSON-lines log file, e.g. 'logs/hexview.log'
    'max_file_size': 10 * 1024 * 1024,
    'backup_count': 3,
    'use_json': True,
    'use_colors': None,              # auto-detect from the console stream
}
