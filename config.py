# Global configuration for secretweave reconstruction tooling
import os

class Config:
    # Network settings
    SERVICE_HOST = os.environ.get("SECRETWEAVE_HOST", "localhost")
    SERVICE_PORT = int(os.environ.get("SECRETWEAVE_PORT", 5000))
    REQUEST_TIMEOUT = 10  # seconds
    SERVICE_TRACKER_ENTRIES = 1000  # datasets kept in the service event log

    # Record format
    METADATA_KEY = "keys"
    MIN_BASE = 2
    MAX_BASE = 36
    SHARE_X_BASE = 10  # share keys are decimal numerals

    # Share generation
    COEFFICIENT_BITS = 256
    DEFAULT_BASES = [2, 3, 4, 6, 7, 8, 10, 12, 15, 16, 36]

    # Paths
    DATA_DIR = os.environ.get("SECRETWEAVE_DATA_DIR", "data")
    TRACKER_LOG = "reconstruction_logs.json"
    SAMPLES_DIR = "samples"
    INPUT_FILES = [
        os.path.join(SAMPLES_DIR, "input1.json"),
        os.path.join(SAMPLES_DIR, "input2.json"),
    ]
    OUTPUT_FILE = "output.txt"

    # Research parameters
    PERFORMANCE_SAMPLES = 100  # For benchmarking

    @classmethod
    def service_url(cls):
        return f"http://{cls.SERVICE_HOST}:{cls.SERVICE_PORT}"

    @classmethod
    def tracker_log(cls):
        return os.path.join(cls.DATA_DIR, cls.TRACKER_LOG)

    @classmethod
    def ensure_data_dir(cls):
        if not os.path.exists(cls.DATA_DIR):
            os.makedirs(cls.DATA_DIR)
        return cls.DATA_DIR
