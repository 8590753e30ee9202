from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

UI_CHOICES = ('curses', 'text')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')


def _truthy(v: Optional[str]) -> bool:
    return (v or '').strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass(frozen=True)
class Settings:
    ui: str = 'curses'
    log_level: str = 'WARNING'
    log_file: Optional[str] = None
    host: str = '127.0.0.1'
    port: int = 5000
    debug: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> 'Settings':
        """Reads QUADTURN_* variables (and FLASK_DEBUG/DEBUG); unset or invalid values fall back to defaults."""
        env = os.environ if env is None else env
        ui = env.get('QUADTURN_UI', 'curses').strip().lower()
        if ui not in UI_CHOICES:
            ui = 'curses'
        level = env.get('QUADTURN_LOG_LEVEL', 'WARNING').strip().upper()
        if level not in LOG_LEVELS:
            level = 'WARNING'
        try:
            port = int(env.get('QUADTURN_PORT', '5000'))
        except ValueError:
            port = 5000
        return cls(
            ui=ui,
            log_level=level,
            log_file=env.get('QUADTURN_LOG_FILE') or None,
            host=env.get('QUADTURN_HOST', '127.0.0.1'),
            port=port,
            debug=_truthy(env.get('FLASK_DEBUG', env.get('DEBUG', '0'))),
        )
