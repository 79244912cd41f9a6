import json
import logging
import numbers
import os

# KEY VALUES FOR CONFIG
WAIT = 'WAIT'
LOGLEVEL = 'LOGLEVEL'

DEFAULT_WAIT = 0.1
DEFAULT_LOGLEVEL = 'WARNING'


class Settings:
    def __init__(self, cfg=None):
        self._config = dict(cfg or {})

    @staticmethod
    def load_file(file):
        if os.path.exists(file):
            with open(file) as cfg:
                return Settings(json.load(cfg))
        else:
            raise RuntimeError("configuration not found!!!")

    @property
    def config(self):
        return self._config

    @property
    def wait(self):
        value = self._config.get(WAIT, DEFAULT_WAIT)
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise ValueError(f"{WAIT} must be a number of seconds, got {value!r}")
        if value < 0:
            raise ValueError(f"{WAIT} must be >= 0, got {value}")
        return float(value)

    @property
    def log_level(self):
        name = str(self._config.get(LOGLEVEL, DEFAULT_LOGLEVEL)).upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"unknown {LOGLEVEL} {name!r}")
        return level

    def override(self, **values):
        """Return a copy with the non-None values replacing the loaded ones."""
        cfg = dict(self._config)
        cfg.update({key.upper(): value for key, value in values.items() if value is not None})
        return Settings(cfg)
