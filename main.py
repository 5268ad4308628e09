from __future__ import annotations

import argparse
import logging
import time
from typing import Optional

import requests

from throttle.throttle import Throttle


def _poll_once(url: str, timeout: float) -> tuple[Optional[int], Optional[str]]:
    try:
        resp = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        return None, type(exc).__name__
    if 200 <= resp.status_code < 300:
        return resp.status_code, None
    return resp.status_code, f"HTTP_{resp.status_code}"


def run_demo(tps: float, iterations: int, url: Optional[str] = None, timeout: float = 10.0) -> tuple[int, int]:
    """Run iterations throttled to tps, optionally polling url each time.

    Returns (ok, fail) counts."""
    throttle = Throttle.from_fixed_rate(tps)
    start = time.monotonic()

    ok = 0
    fail = 0
    for i in range(iterations):
        throttle.acquire()
        offset_ms = int((time.monotonic() - start) * 1000)

        if url is None:
            ok += 1
            print(f"iteration={i} offset_ms={offset_ms}")
            continue

        status_code, error_type = _poll_once(url, timeout)
        if error_type is None:
            ok += 1
        else:
            fail += 1
        print(f"iteration={i} offset_ms={offset_ms} status={status_code} error={error_type}")

    elapsed = time.monotonic() - start
    print(f"\nDONE: iterations={iterations} ok={ok} fail={fail} elapsed_s={elapsed:.3f}")
    return ok, fail


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Run a loop slowed down by a fixed-rate throttle")
    parser.add_argument("--tps", type=float, default=10.0, help="Transactions per second to throttle to")
    parser.add_argument("--iterations", type=int, default=11, help="Number of throttled iterations")
    parser.add_argument("--url", default=None, help="Optional URL to GET on every iteration")
    parser.add_argument("--timeout", type=float, default=10.0, help="HTTP timeout in seconds")
    parser.add_argument("--verbose", action="store_true", help="Log throttle decisions")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(message)s")

    run_demo(tps=args.tps, iterations=args.iterations, url=args.url, timeout=args.timeout)


if __name__ == "__main__":
    main()
