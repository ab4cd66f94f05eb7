from flask import Flask, jsonify, request
from flask_cors import CORS
import config
from shamir import ShamirSecretReconstruction
from secretweave.codec import to_decimal
from secretweave.errors import ReconstructionError
from batch.batch_core import BatchReconstructor
from batch.recovery_tracker import ReconstructionTracker

app = Flask(__name__)
CORS(app)
reconstructor = ShamirSecretReconstruction()
tracker = ReconstructionTracker(max_entries=config.Config.SERVICE_TRACKER_ENTRIES)
batch = BatchReconstructor(reconstructor=reconstructor, tracker=tracker)
stats = {"reconstructions": 0, "failures": 0}

def _error(message, status, error_type=None):
    body = {"error": message}
    if error_type:
        body["type"] = error_type
    return jsonify(body), status

@app.route('/reconstruct', methods=['POST'])
def reconstruct():
    record = request.get_json(silent=True)
    if record is None:
        return _error("Request body must be a JSON record", 400)

    try:
        secret = reconstructor.recover_secret(record)
    except ReconstructionError as e:
        stats["failures"] += 1
        return _error(str(e), 422, type(e).__name__)

    stats["reconstructions"] += 1
    # Decimal text so no client-side number type truncates the secret
    return jsonify({"secret": to_decimal(secret)})

@app.route('/reconstruct/batch', methods=['POST'])
def reconstruct_batch():
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not isinstance(data.get("datasets"), dict):
        return _error("Request body must hold a 'datasets' object", 400)

    results = {}
    for result in batch.run_records(data["datasets"]):
        if result.ok:
            stats["reconstructions"] += 1
        else:
            stats["failures"] += 1
        results[result.name] = {
            "secret": to_decimal(result.secret) if result.ok else None,
            "error": result.error
        }
    return jsonify({"results": results})

@app.route('/status', methods=['GET'])
def status():
    return jsonify({
        "status": "active",
        "reconstructions": stats["reconstructions"],
        "failures": stats["failures"],
        "tracked_datasets": len(tracker.logs)
    })

if __name__ == '__main__':
    app.run(
        host=config.Config.SERVICE_HOST,
        port=config.Config.SERVICE_PORT,
        threaded=True
    )
