import json
import os
from secretweave.errors import RecordShapeError

class DatasetStore:
    def __init__(self, directory="."):
        self.directory = directory

    def _path(self, name):
        if not name.endswith(".json"):
            name = f"{name}.json"
        return os.path.join(self.directory, name)

    def load(self, path):
        """Read one JSON record; malformed files raise RecordShapeError"""
        with open(path, "r") as f:
            try:
                record = json.load(f)
            except json.JSONDecodeError as e:
                raise RecordShapeError(f"{path} is not valid JSON: {e}")
        if not isinstance(record, dict):
            raise RecordShapeError(f"{path} must contain a JSON object")
        return record

    def save(self, name, record):
        if not os.path.exists(self.directory):
            os.makedirs(self.directory)
        path = self._path(name)
        with open(path, "w") as f:
            json.dump(record, f, indent=2)
        return path

    def list_datasets(self):
        if not os.path.isdir(self.directory):
            return []
        return [
            os.path.join(self.directory, name)
            for name in sorted(os.listdir(self.directory))
            if name.endswith(".json")
        ]
