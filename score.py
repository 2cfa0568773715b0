#!/usr/bin/env python3


from pathlib import Path
import subprocess
import threading
import time
import json
import signal
import os
import sys

from fizz import LIMIT, expected
from variants import VARIANTS, get_variant


script_dir = Path(__file__).parent

TIMEOUT = 60


def read_from_pipe(proc, append_data):
    for line in proc.stdout:
        append_data(line)


def check_output(lines, limit=LIMIT):
    """Return the 1-based number of the first wrong line, or None if all match."""
    reference = expected(limit)
    for number, (got, want) in enumerate(zip(lines, reference), start=1):
        if got != want:
            return number

    if len(lines) != len(reference):
        return min(len(lines), len(reference)) + 1

    return None


def score_variant(name, limit=LIMIT, timeout=TIMEOUT):
    print(f"Testing {name}")
    started = time.perf_counter()
    with subprocess.Popen(
        [sys.executable, str(script_dir / "fizz.py"), name, str(limit)],
        cwd=script_dir,
        stdout=subprocess.PIPE,
        stderr=subprocess.DEVNULL,
        universal_newlines=True,
        preexec_fn=os.setsid,
    ) as proc:
        # Read from pipe in a thread
        lines = []

        def append_data(new_data):
            lines.append(new_data.rstrip("\n"))

        thread = threading.Thread(target=read_from_pipe, args=(proc, append_data))
        thread.start()

        timed_out = False
        try:
            proc.wait(timeout=timeout)
        except subprocess.TimeoutExpired:
            timed_out = True
            os.killpg(os.getpgid(proc.pid), signal.SIGTERM)
            proc.wait()

        thread.join()
        seconds = time.perf_counter() - started

    # A killed run is checked up to where it stopped, any other failed exit is wrong from the start
    if proc.returncode == 0 or timed_out:
        first_mismatch = check_output(lines, limit)
    else:
        first_mismatch = 1

    return {
        "seconds": seconds,
        "lines": len(lines),
        "correct": first_mismatch is None and not timed_out,
        "first_mismatch": first_mismatch,
        "timed_out": timed_out,
    }


def main():
    if len(sys.argv) == 2:
        # Run just the variant specified in the command line
        force = sys.argv[1]
        try:
            get_variant(force)
        except ValueError as e:
            print(f"score: {e}", file=sys.stderr)
            sys.exit(2)
    else:
        # Run all variants
        force = None

    results_file = script_dir / "results.json"

    results = {}
    if force is not None:
        # Try to load all results from previous results file
        if results_file.exists():
            with open(results_file, "r") as f:
                results = json.load(f)

    for name in VARIANTS:
        if force is not None and name != force:
            print(f"Skipping {name}")
            continue

        results[name] = score_variant(name)

    with open(results_file, "w") as f:
        json.dump(results, f, indent=2)


if __name__ == "__main__":
    main()
