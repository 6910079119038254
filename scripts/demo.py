#!/usr/bin/env python3
"""Fetch any Horizon resource by path and print it.

Examples:
  python scripts/demo.py "/ledgers?order=desc&limit=3"
  python scripts/demo.py /ledgers/123/payments --dry-run
  HORIZON_URL=https://horizon.stellar.org python scripts/demo.py /accounts/GABC.../offers
"""
from __future__ import annotations

import argparse
import logging
import os
import sys

from horizon_client import Client, ClientConfig, HorizonError, Records
from horizon_client.core import DEFAULT_TIMEOUT, HORIZON_TEST_URL
from horizon_client.endpoint import resolve


def parse_args(argv=None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Query a Horizon server by resource path.")
    ap.add_argument("path", help="resource path with optional query, e.g. '/ledgers?limit=3'")
    ap.add_argument("--host", default=os.environ.get("HORIZON_URL", HORIZON_TEST_URL),
                    help="server base URL (default: $HORIZON_URL or the test network)")
    ap.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT)
    ap.add_argument("--dry-run", action="store_true", help="print the request URL and exit")
    ap.add_argument("--verbose", action="store_true")
    return ap.parse_args(argv)


def print_result(result) -> None:
    if isinstance(result, Records):
        print(f"{len(result)} record(s)")
        for i, rec in enumerate(result, start=1):
            print(f"  [{i}] {rec!r}")
        if result.next_cursor is not None:
            print(f"next cursor: {result.next_cursor}")
        return
    print(repr(result))


def main(argv=None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        endpoint = resolve(args.path)
        if args.dry_run:
            req = endpoint.into_request(args.host)
            print(f"[dry-run] {type(endpoint).__module__}.{type(endpoint).__name__}")
            print(f"[dry-run] {req.method} {req.url}")
            return 0
        with Client(ClientConfig(host=args.host, timeout=args.timeout)) as client:
            print_result(client.request(endpoint))
    except HorizonError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
