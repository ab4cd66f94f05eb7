import time
import json
import os
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.backends import default_backend
from secretweave.codec import to_decimal

def _canonical(value):
    # json.dumps hits the same digit limit as str() on very long ints
    if isinstance(value, dict):
        return {str(key): _canonical(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_canonical(item) for item in value]
    if isinstance(value, int) and not isinstance(value, bool):
        return to_decimal(value)
    return value

def record_digest(record) -> str:
    """SHA-256 over the canonical JSON form of a record"""
    canonical = json.dumps(_canonical(record), sort_keys=True, separators=(",", ":"), default=str)
    digest = hashes.Hash(hashes.SHA256(), backend=default_backend())
    digest.update(canonical.encode("utf-8"))
    return digest.finalize().hex()

class ReconstructionTracker:
    """
    Event log for reconstructions, one entry per dataset. Kept in memory and
    written out as JSON after every event when a log file is given. With
    max_entries set, the oldest datasets are dropped once the cap is passed.
    """
    def __init__(self, log_file=None, max_entries=None):
        self.log_file = log_file
        self.max_entries = max_entries
        self.logs = self._load_logs()

    def _load_logs(self):
        if self.log_file and os.path.exists(self.log_file):
            with open(self.log_file, "r") as f:
                return json.load(f)
        return {}

    def _save_logs(self):
        if not self.log_file:
            return
        directory = os.path.dirname(self.log_file)
        if directory and not os.path.exists(directory):
            os.makedirs(directory)
        with open(self.log_file, "w") as f:
            json.dump(self.logs, f, indent=2)

    def _add_event(self, dataset_id, event, **details):
        self.logs[dataset_id]["events"].append({"time": time.time(), "event": event, **details})

    def _evict(self):
        if self.max_entries is None:
            return
        while len(self.logs) > self.max_entries:
            del self.logs[next(iter(self.logs))]

    def log_dataset_start(self, dataset_id, record):
        # Re-inserting moves a repeated dataset to the newest position
        self.logs.pop(dataset_id, None)
        self.logs[dataset_id] = {
            "start_time": time.time(),
            "status": "initiated",
            "record_digest": record_digest(record),
            "events": [{"time": time.time(), "event": "dataset_started"}]
        }
        self._evict()
        self._save_logs()

    def log_points_selected(self, dataset_id, x_values):
        if dataset_id in self.logs:
            self._add_event(dataset_id, "points_selected", x_values=[to_decimal(x) for x in x_values])
            self._save_logs()

    def log_dataset_success(self, dataset_id, secret):
        if dataset_id in self.logs:
            self.logs[dataset_id]["status"] = "success"
            self.logs[dataset_id]["secret"] = to_decimal(secret)
            self.logs[dataset_id]["end_time"] = time.time()
            self._add_event(dataset_id, "dataset_success")
            self._save_logs()

    def log_dataset_failure(self, dataset_id, error):
        if dataset_id in self.logs:
            self.logs[dataset_id]["status"] = "failed"
            self.logs[dataset_id]["end_time"] = time.time()
            self._add_event(dataset_id, "dataset_failed", error=str(error), error_type=type(error).__name__)
            self._save_logs()

    def get_log(self, dataset_id):
        return self.logs.get(dataset_id)
