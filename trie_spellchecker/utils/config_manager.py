# config_manager.py - JSON config manager

import json
import os
from typing import Any, Dict, Optional

from trie_spellchecker.utils.logger_utils import Log

DEFAULTS: Dict[str, Any] = {
    "dictionary_path": "/usr/share/dict/words",
    "sentinel": "-1",  # query that ends the interactive session
    "show_timings": True,
    "max_suggestions": 0,  # 0 = show all
    "generator_count": 50,
    "generator_seed": None,
    "metrics_path": None,  # JSON file for query timings, saved on exit
    "log_path": "logs/spellchecker.log",
}

# options whose default is None, and the type they take when set
OPTIONAL_TYPES: Dict[str, type] = {
    "generator_seed": int,
    "metrics_path": str,
}


class Config:
    """
    Settings for the CLI and tools.
    path=None keeps the defaults in memory only; otherwise the JSON file is
    read if present and created with the defaults if not.
    """

    def __init__(self, path: Optional[str] = None):
        self.path = path
        self.data: Dict[str, Any] = dict(DEFAULTS)
        if path:
            self._load()

    def _load(self):
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    loaded = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                Log.warning(f"config {self.path} unreadable, using defaults: {e}")
                return
            if isinstance(loaded, dict):
                self.data.update({k: v for k, v in loaded.items() if k in DEFAULTS})
        else:
            self.save()

    def save(self):
        if not self.path:
            return
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def set(self, key: str, val: Any) -> bool:
        """Set an option from a string/value, casting to the default's type. False if unknown."""
        if key not in self.data:
            return False
        self.data[key] = _cast(key, val)
        self.save()
        return True


def _cast(key: str, val: Any) -> Any:
    default = DEFAULTS[key]
    if not isinstance(val, str):
        return val
    if isinstance(default, bool):
        low = val.strip().lower()
        if low in ("1", "true", "yes", "on"):
            return True
        if low in ("0", "false", "no", "off"):
            return False
        raise ValueError(f"not a boolean: {val!r}")
    if default is None:
        # "none" clears an optional setting
        if val.strip().lower() in ("", "none"):
            return None
        return OPTIONAL_TYPES[key](val)
    return type(default)(val)
