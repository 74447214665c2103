# logger_utils.py - logging messages and timing metrics for the spell checker

import time
import os
from datetime import datetime

# Directory where log files are stored (created on first write)
LOG_DIR = "logs"

# Path to the default log file, can be overriden with Log.set_path
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "spellchecker.log")


class Log:
    """
    Lightweight file logger for messages and metrics.
    Each entry is written as: [YYYY-MM-DD HH:MM:SS] message
    Set Log.enabled = False to silence it (tests, piped runs).
    """

    path = DEFAULT_LOG_PATH
    enabled = True

    @classmethod
    def set_path(cls, path: str) -> None:
        cls.path = path

    @classmethod
    def write(cls, msg: str) -> None:
        """Append a timestamped line to the log file."""
        if not cls.enabled:
            return
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {msg}"
        folder = os.path.dirname(cls.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(cls.path, "a", encoding="utf-8") as f:
            f.write(line + "\n")

    @classmethod
    def info(cls, msg: str) -> None:
        cls.write(f"INFO    | {msg}")

    @classmethod
    def warning(cls, msg: str) -> None:
        cls.write(f"WARNING | {msg}")

    @classmethod
    def error(cls, msg: str) -> None:
        cls.write(f"ERROR   | {msg}")

    @classmethod
    def metric(cls, tag, value, unit=""):
        """
        Record a metric (timing, counts, sizes).
        Example: [2026-01-01 12:45:02] METRIC  | dictionary load: 0.412s
        """
        cls.write(f"METRIC  | {tag}: {value}{unit}")

    @staticmethod
    def time_block(label):
        """
        Helper for measuring execution time of a code block.
        To use:
            with Log.time_block("dictionary load") as t:
                do_some_work()
            t.elapsed  # seconds
        It automatically logs how long the block took.
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""

    def __init__(self, label):
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        """On exit, store the duration and record it as a metric."""
        self.elapsed = time.perf_counter() - self.start
        Log.metric(f"{self.label} done", round(self.elapsed, 3), "s")
