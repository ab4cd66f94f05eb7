import os
import signal
import subprocess
import sys
import time
import config

processes = []

def _env():
    # Child scripts live in subdirectories but import from the project root
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [os.getcwd(), env.get("PYTHONPATH")]))
    return env

def start_service():
    print(f"Starting Reconstruction Service on {config.Config.service_url()}...")
    proc = subprocess.Popen([sys.executable, os.path.join("service", "server.py")], env=_env())
    processes.append(proc)
    time.sleep(2)

def run_client(paths):
    print("Submitting datasets to the service...")
    return subprocess.run([sys.executable, os.path.join("client", "app.py"), *paths], env=_env()).returncode

def run_tests():
    print("Running Validation Tests...")
    return subprocess.run([sys.executable, "-m", "pytest", "test"]).returncode

def cleanup(signum=None, frame=None):
    print("\nTerminating processes...")
    for p in processes:
        p.terminate()
    if signum is not None:
        sys.exit(0)

if __name__ == "__main__":
    signal.signal(signal.SIGINT, cleanup)

    start_service()
    try:
        if input("Run tests? (y/n): ").lower() == "y":
            status = run_tests()
        else:
            status = run_client(sys.argv[1:] or config.Config.INPUT_FILES)
    finally:
        cleanup()
    sys.exit(status)
