#!/usr/bin/env python3
"""Benchmark the GraphQL endpoint: latency (p50, p95, p99) and QPS.

Usage:
    export API_URL=http://localhost:8000
    uv run python scripts/bench_graphql.py [--num-queries 200] [--method post]

A preflight probe runs first and fails fast when CORS is not answered with 204.
"""
from __future__ import annotations

import argparse
import os
import statistics
import sys
import time

import httpx

QUERY = "{ hello }"


def probe_preflight(client: httpx.Client, url: str, origin: str) -> None:
    r = client.options(
        url,
        headers={
            "Origin": origin,
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "content-type",
        },
    )
    if r.status_code != 204:
        raise SystemExit(f"Preflight returned {r.status_code}, expected 204")
    print(f"Preflight OK: allow-origin={r.headers.get('access-control-allow-origin')!r}")


def send(client: httpx.Client, url: str, method: str) -> httpx.Response:
    if method == "get":
        return client.get(url, params={"query": QUERY})
    return client.post(url, json={"query": QUERY})


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark GraphQL endpoint")
    parser.add_argument("--num-queries", type=int, default=100, help="Number of requests")
    parser.add_argument("--method", choices=("get", "post"), default="post", help="HTTP method")
    parser.add_argument("--origin", type=str, default="http://localhost:3000", help="Origin for the preflight probe")
    parser.add_argument("--output", type=str, default="", help="Optional output file path")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")
    graphql_url = f"{api_url}{os.environ.get('GRAPHQL_PATH', '/graphql')}"

    latencies: list[float] = []
    errors = 0
    with httpx.Client(timeout=30.0) as client:
        probe_preflight(client, graphql_url, args.origin)

        print(f"Running {args.num_queries} {args.method.upper()} requests...")
        start_total = time.perf_counter()
        for _ in range(args.num_queries):
            t0 = time.perf_counter()
            r = send(client, graphql_url, args.method)
            elapsed = time.perf_counter() - t0
            if r.status_code == 200 and "errors" not in r.json():
                latencies.append(elapsed)
            else:
                errors += 1
        total_elapsed = time.perf_counter() - start_total

    n = len(latencies)
    if n == 0:
        print("No successful queries.")
        return 1

    qps = n / total_elapsed
    p50 = statistics.median(latencies) * 1000
    p95 = sorted(latencies)[int(n * 0.95) - 1] * 1000 if n >= 20 else p50
    p99 = sorted(latencies)[int(n * 0.99) - 1] * 1000 if n >= 100 else p95

    summary = (
        f"GraphQL benchmark ({args.method.upper()}, queries={n}, errors={errors})\n"
        f"  QPS: {qps:.2f}\n"
        f"  Latency: p50={p50:.1f} ms, p95={p95:.1f} ms, p99={p99:.1f} ms\n"
        f"  Total time: {total_elapsed:.2f} s\n"
    )
    print(summary)

    if args.output:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(summary)
        print(f"Wrote {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
