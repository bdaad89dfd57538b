#!/usr/bin/env python3
"""Benchmark permission checks: latency (p50, p95, p99) and QPS.

Usage:
    export API_URL=http://localhost:8000 KEYCLOAK_URL=... KEYCLOAK_CLIENT_SECRET=...
    uv run python scripts/bench_check.py [--num-checks 500] [--permission VIEW_REPORTS]

Without KEYCLOAK_CLIENT_SECRET the acting subject is sent as X-Subject-Id
(requires STAFFPERM_TRUST_SUBJECT_HEADER=true on the server).
"""
from __future__ import annotations

import argparse
import os
import statistics
import sys
import time

import httpx


def get_token(
    keycloak_url: str,
    realm: str,
    client_id: str,
    client_secret: str,
    username: str,
    password: str,
) -> str:
    url = f"{keycloak_url.rstrip('/')}/realms/{realm}/protocol/openid-connect/token"
    r = httpx.post(
        url,
        data={
            "grant_type": "password",
            "client_id": client_id,
            "client_secret": client_secret,
            "username": username,
            "password": password,
        },
        headers={"Content-Type": "application/x-www-form-urlencoded"},
        timeout=30.0,
    )
    r.raise_for_status()
    return r.json()["access_token"]


def auth_headers() -> dict[str, str]:
    client_secret = os.environ.get("KEYCLOAK_CLIENT_SECRET", "")
    if not client_secret:
        return {"X-Subject-Id": os.environ.get("BENCH_SUBJECT", "bench-manager")}
    print("Getting token...")
    token = get_token(
        os.environ.get("KEYCLOAK_URL", "http://localhost:8080"),
        os.environ.get("KEYCLOAK_REALM", "staff"),
        os.environ.get("KEYCLOAK_CLIENT_ID", "staffperm-api"),
        client_secret,
        os.environ.get("BENCH_USER", "testuser"),
        os.environ.get("BENCH_PASSWORD", "testpass"),
    )
    return {"Authorization": f"Bearer {token}"}


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark permission checks")
    parser.add_argument("--num-checks", type=int, default=200, help="Number of check requests")
    parser.add_argument("--permission", type=str, default="VIEW_REPORTS", help="Permission to check")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")
    headers = auth_headers()

    latencies: list[float] = []
    granted = errors = 0
    print(f"Running {args.num_checks} checks of {args.permission}...")
    start_total = time.perf_counter()
    with httpx.Client(timeout=30.0) as client:
        for _ in range(args.num_checks):
            t0 = time.perf_counter()
            r = client.get(f"{api_url}/v1/me/permissions/{args.permission}", headers=headers)
            elapsed = time.perf_counter() - t0
            if r.status_code == 200:
                latencies.append(elapsed)
                granted += bool(r.json()["allowed"])
            else:
                errors += 1
    total_elapsed = time.perf_counter() - start_total

    n = len(latencies)
    if n == 0:
        print("No successful checks.")
        return 1

    qps = n / total_elapsed
    ordered = sorted(latencies)
    p50 = statistics.median(latencies) * 1000
    p95 = ordered[int(n * 0.95) - 1] * 1000 if n >= 20 else p50
    p99 = ordered[int(n * 0.99) - 1] * 1000 if n >= 100 else p95

    print(
        f"Check benchmark (permission={args.permission}, checks={n}, "
        f"granted={granted}, errors={errors})\n"
        f"  QPS: {qps:.2f}\n"
        f"  Latency: p50={p50:.1f} ms, p95={p95:.1f} ms, p99={p99:.1f} ms\n"
        f"  Total time: {total_elapsed:.2f} s"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
