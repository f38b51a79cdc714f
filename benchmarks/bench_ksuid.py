"""Create/format/parse throughput for KSUIDs.

Usage: python -m benchmarks.bench_ksuid [iterations]
"""

import sys
import time

from internal.logging import get_logger
from ksuid import KSUID


def bench(name, fn, iterations):
    start = time.perf_counter()
    for _ in range(iterations):
        fn()
    elapsed = time.perf_counter() - start
    return {"bench": name, "iterations": iterations, "elapsed_s": round(elapsed, 4),
            "ops_per_s": round(iterations / elapsed) if elapsed else None}


def run(iterations=100_000):
    sample = KSUID.generate()
    text = str(sample)
    return [
        bench("create", KSUID.generate, iterations),
        bench("format", sample.__str__, iterations),
        bench("parse", lambda: KSUID.parse(text), iterations),
    ]


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    iterations = int(argv[0]) if argv else 100_000
    log = get_logger()
    for result in run(iterations):
        log.info("benchmark", **result)


if __name__ == "__main__":
    main()
