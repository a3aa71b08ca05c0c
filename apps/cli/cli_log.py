"""Timestamped progress logging shared by the CLIs. Goes to stderr so stdout stays a clean report."""

import sys
import time


def ts() -> str:
    # Local time timestamp for logs
    return time.strftime("%Y-%m-%d %H:%M:%S")


def log(msg: str, *, quiet: bool = False) -> None:
    if not quiet:
        print(f"[{ts()}] {msg}", file=sys.stderr, flush=True)
