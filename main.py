# ----- main.py -----
import argparse
import os
import sys
import config
from shamir import ShamirSecretReconstruction
from secretweave.codec import decode, parse_decimal, to_decimal
from secretweave.polynomial import split_secret, build_record
from batch.batch_core import BatchReconstructor
from batch.dataset_store import DatasetStore
from batch.recovery_tracker import ReconstructionTracker
from batch.report import write_report

# Values checked before any dataset is processed
SELF_CHECK_CASES = [
    ("111", 2),
    ("213", 4),
    ("13444211440455345511", 6),
]

# --- Helper Functions ---
def print_header(title):
    print("\n" + "="*50)
    print(f"{title}")
    print("="*50)

def print_backend(message):
    print(f"[BACKEND LOG]... {message}")

def run_decoder_self_check():
    print_header("Testing Base Conversion")
    for digits, base in SELF_CHECK_CASES:
        print(f"'{digits}' base {base} = {to_decimal(decode(digits, base))}")

def generate_dataset(path, secret, threshold, num_shares):
    """Write a fresh record whose constant term is secret"""
    points = split_secret(secret, threshold, num_shares)
    record = build_record(points, threshold)
    directory, filename = os.path.split(path)
    saved = DatasetStore(directory or ".").save(filename, record)
    print_backend(f"Generated {num_shares} shares (k = {threshold}) in {saved}")
    return saved

def parse_args(argv):
    parser = argparse.ArgumentParser(
        description="Reconstruct Shamir secrets from shares encoded in arbitrary bases"
    )
    parser.add_argument("inputs", nargs="*", help="JSON records to process")
    parser.add_argument("-o", "--output", default=config.Config.OUTPUT_FILE,
                        help="where to write the results report")
    parser.add_argument("--no-track", action="store_true",
                        help="do not persist the reconstruction event log")
    parser.add_argument("--skip-self-check", action="store_true")
    parser.add_argument("--generate", metavar="PATH",
                        help="write a new record instead of reconstructing")
    parser.add_argument("--secret", type=parse_decimal, default=0)
    parser.add_argument("--threshold", type=int, default=3)
    parser.add_argument("--shares", type=int, default=5)
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(sys.argv[1:] if argv is None else argv)

    if args.generate:
        generate_dataset(args.generate, args.secret, args.threshold, args.shares)
        return 0

    if not args.skip_self_check:
        run_decoder_self_check()

    if args.no_track:
        tracker = ReconstructionTracker()
    else:
        config.Config.ensure_data_dir()
        tracker = ReconstructionTracker(config.Config.tracker_log())

    batch = BatchReconstructor(
        reconstructor=ShamirSecretReconstruction(log=print_backend),
        tracker=tracker,
        log=print_header
    )
    results = batch.run(args.inputs or config.Config.INPUT_FILES)

    write_report(results, args.output)
    print(f"\nResults saved to {args.output}")

    print_header("FINAL RESULTS")
    for result in results:
        print(f"{result.name} Constant (c): {to_decimal(result.secret) if result.ok else 'no result'}")
    return 0 if all(result.ok for result in results) else 1

if __name__ == "__main__":
    sys.exit(main())
