import sys
import requests
import config
from tabulate import tabulate
from secretweave.codec import parse_decimal, to_decimal
from batch.dataset_store import DatasetStore

class ReconstructionClient:
    def __init__(self, service_url=None):
        self.service_url = service_url or config.Config.service_url()
        self.store = DatasetStore()

    def reconstruct(self, record):
        """Submit one record; returns (secret, error) with exactly one set"""
        try:
            response = requests.post(
                f"{self.service_url}/reconstruct",
                json=record,
                timeout=config.Config.REQUEST_TIMEOUT
            )
        except requests.exceptions.RequestException as e:
            return None, f"Service unreachable: {e}"

        if response.status_code == 200:
            try:
                return parse_decimal(response.json()["secret"]), None
            except (KeyError, TypeError, ValueError) as e:
                return None, f"Malformed service response: {e}"

        try:
            body = response.json()
            error = f"{body.get('type', 'Error')}: {body.get('error')}"
        except ValueError:
            error = response.text
        return None, error

    def reconstruct_file(self, path):
        try:
            record = self.store.load(path)
        except (OSError, ValueError) as e:
            return None, f"Cannot read {path}: {e}"
        return self.reconstruct(record)

def main(argv=None):
    paths = (sys.argv[1:] if argv is None else argv) or config.Config.INPUT_FILES
    client = ReconstructionClient()

    rows = []
    for path in paths:
        secret, error = client.reconstruct_file(path)
        rows.append([path, "no result" if secret is None else to_decimal(secret), error or "ok"])

    print(tabulate(rows, headers=["Dataset", "Constant (c)", "Status"], disable_numparse=True))
    return 0 if all(row[2] == "ok" for row in rows) else 1

if __name__ == "__main__":
    sys.exit(main())
