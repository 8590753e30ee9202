from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = 'WARNING', log_file: Optional[str] = None, stream: bool = True) -> logging.Logger:
    """Installs a single handler on the package logger.

    With stream=False and no file (the curses UI owns the terminal) records
    are discarded instead of being written over the screen.
    """
    root = logging.getLogger('quadturn_core')
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, encoding='utf-8')
    elif stream:
        handler = logging.StreamHandler()
    else:
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.propagate = False
    return root
