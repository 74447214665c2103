# metrics_tracker.py - running sums/counts for query timings

import json
import os
import threading
from collections import defaultdict
from typing import Optional


class Metrics:
    def __init__(self, path: Optional[str] = None):
        self.path = path  # None keeps everything in memory
        self.m = defaultdict(float)
        self.n = defaultdict(int)
        self._lock = threading.Lock()
        self._load()

    def _load(self):
        if not self.path or not os.path.exists(self.path):
            return
        with open(self.path, "r", encoding="utf8") as f:
            d = json.load(f)
        for k, v in d.items():
            self.m[k] = v["sum"]
            self.n[k] = v["count"]

    def save(self):
        if not self.path:
            return
        d = {k: {"sum": self.m[k], "count": self.n[k]} for k in self.m}
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(d, f, indent=2)

    def record(self, key, val):
        with self._lock:
            self.m[key] += val
            self.n[key] += 1

    def count(self, key):
        return self.n.get(key, 0)

    def avg(self, key):
        if self.n.get(key, 0) == 0:
            return 0.0
        return self.m[key] / self.n[key]
