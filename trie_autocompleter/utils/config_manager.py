# config_manager.py - JSON config manager

import json
import os

from typing_extensions import TypedDict

from trie_autocompleter.utils.logger_utils import LEVELS, Log


class ConfigData(TypedDict):
    dictionary_path: str
    min_prefix: int
    commit_key: str
    allow_zero_freq: bool
    log_path: str
    log_level: str
    log_to_console: bool


DEFAULTS: ConfigData = {
    "dictionary_path": os.path.join("data", "word-freq.txt"),
    "min_prefix": 2,  # shortest letter run worth completing
    "commit_key": "enter",
    "allow_zero_freq": False,
    "log_path": os.path.join("logs", "autocompleter.log"),
    "log_level": "INFO",
    "log_to_console": False,
}


class Config:
    def __init__(self, path="config.json"):
        self.path = path
        self.data: ConfigData = dict(DEFAULTS)
        self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            Log.warning(f"[Config] ignoring unreadable {self.path}: {e}")
            return
        if not isinstance(raw, dict):
            Log.warning(f"[Config] ignoring {self.path}: top level is not an object")
            return
        for k, v in raw.items():
            if k not in DEFAULTS:
                Log.warning(f"[Config] unknown option {k!r} in {self.path}")
                continue
            try:
                self.data[k] = _coerce(k, v)
            except (TypeError, ValueError) as e:
                Log.warning(f"[Config] bad value for {k!r} in {self.path}, using default: {e}")

    def __getitem__(self, key):
        return self.data[key]

    def save(self):
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def set(self, key, val):
        """Set an option from a string value, coerced to the default's type."""
        if key not in DEFAULTS:
            raise KeyError(f"no such option: {key}")
        self.data[key] = _coerce(key, val)

    def apply_logging(self):
        """Push the logging options into the shared Log settings."""
        Log.configure(
            path=self.data["log_path"],
            level=self.data["log_level"],
            echo=self.data["log_to_console"],
        )


def _coerce(key, val):
    """Convert `val` to the type of the default for `key`, or raise ValueError."""
    kind = type(DEFAULTS[key])
    if kind is bool:
        if isinstance(val, str):
            return val.strip().lower() in ("1", "true", "yes", "on")
        if not isinstance(val, (bool, int)):
            raise ValueError(f"expected a boolean, got {val!r}")
        return bool(val)
    if kind is int:
        if isinstance(val, bool) or (isinstance(val, float) and not val.is_integer()):
            raise ValueError(f"expected an integer, got {val!r}")
        return int(val)
    if not isinstance(val, str):
        raise ValueError(f"expected a string, got {val!r}")
    if key == "log_level" and val.upper() not in LEVELS:
        raise ValueError(f"unknown log level {val!r}")
    return val
