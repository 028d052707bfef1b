# -*- coding: utf-8 -*-
"""
util.py
General utility function set:
- Unified log output (stderr, timestamped)
- Safe file removal
- Count fasta records 4 progress bars
"""

import os, sys
from datetime import datetime

from .fasta_utils import open_auto


def now():
    """Return the current time as strings."""
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")

def log(msg):
    """Output log."""
    print(f"[{now()}] {msg}", file=sys.stderr, flush=True)

def warn(msg):
    log(f"[WARN] {msg}")

def remove_quietly(path: str) -> bool:
    """Remove path if it exists. Return True when it is gone afterwards."""
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    except OSError:
        return not os.path.exists(path)
    return True

def count_fasta_records(path: str) -> int:
    """Count the number of > in .fasta (plain or .gz)."""
    try:
        with open_auto(path) as f:
            return sum(1 for ln in f if ln.startswith(">"))
    except FileNotFoundError:
        return 0
