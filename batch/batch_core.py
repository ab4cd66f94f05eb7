import os
from collections import Counter
from typing import NamedTuple, Optional
from shamir import ShamirSecretReconstruction
from secretweave.errors import ReconstructionError
from batch.dataset_store import DatasetStore
from batch.recovery_tracker import ReconstructionTracker

class DatasetResult(NamedTuple):
    name: str
    secret: Optional[int]
    error: Optional[str] = None

    @property
    def ok(self):
        return self.secret is not None

class BatchReconstructor:
    """
    Runs one reconstruction per dataset. A failing dataset is reported as
    having no result and never stops the rest of the batch.
    """
    def __init__(self, reconstructor=None, tracker=None, store=None, log=None):
        self.log = log or (lambda message: None)
        self.reconstructor = reconstructor or ShamirSecretReconstruction(log=log)
        self.tracker = tracker or ReconstructionTracker()
        self.store = store or DatasetStore()

    def process_record(self, name, record) -> DatasetResult:
        self.tracker.log_dataset_start(name, record)
        try:
            secret, selected = self.reconstructor.reconstruct(record)
        except ReconstructionError as e:
            self.log(f"Error in {name}: {type(e).__name__}: {e}")
            self.tracker.log_dataset_failure(name, e)
            return DatasetResult(name, None, f"{type(e).__name__}: {e}")

        self.tracker.log_points_selected(name, [point.x for point in selected])
        self.tracker.log_dataset_success(name, secret)
        return DatasetResult(name, secret)

    @staticmethod
    def dataset_name(path):
        return os.path.splitext(os.path.basename(path))[0]

    def process_file(self, path, name=None) -> DatasetResult:
        name = name or self.dataset_name(path)
        self.log(f"Processing {path}")
        try:
            record = self.store.load(path)
        except (OSError, ReconstructionError) as e:
            self.log(f"Error in {name}: {e}")
            self.tracker.log_dataset_start(name, None)
            self.tracker.log_dataset_failure(name, e)
            return DatasetResult(name, None, f"{type(e).__name__}: {e}")
        return self.process_record(name, record)

    def run(self, paths) -> list:
        paths = list(paths)
        stems = Counter(self.dataset_name(path) for path in paths)
        # Files sharing a stem are named by path so their entries stay apart
        return [
            self.process_file(path, name=None if stems[self.dataset_name(path)] == 1 else os.path.normpath(path))
            for path in paths
        ]

    def run_records(self, records: dict) -> list:
        return [self.process_record(name, record) for name, record in records.items()]
