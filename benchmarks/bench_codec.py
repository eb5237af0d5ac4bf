#!/usr/bin/env python3
"""
Benchmark: multiaddr string and binary codecs

Measures per-call latency for:
  1. String parse (with validation)
  2. Binary parse
  3. Binary encode
  4. String render of a binary-parsed address (lazy address decoding)

Usage:
  $ python benchmarks/bench_codec.py --runs 10000 --unit us
"""
from __future__ import annotations

import argparse
import time
from collections.abc import Callable
from statistics import quantiles

from rich import box
from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from maddr import Multiaddr

ADDRESSES = [
    "/ip4/127.0.0.1/tcp/9090",
    "/ip6/2001:db8::1/udp/4001/quic-v1/webtransport",
    "/dns4/bootstrap.example.com/tcp/443/wss/p2p/QmNnooDu7bfjPFoTZYxMNLWUQJyrVwtbZg5gBMjTezGAJN",
    "/unix/var/run/daemon/api.sock",
]

UNITS = {
    "ms": 1e3,
    "us": 1e6,
    "ns": 1e9,
}


def time_calls(label: str, fn: Callable[[], object], runs: int) -> list[float]:
    latencies = []
    for _ in tqdm(range(runs), desc=label):
        start = time.perf_counter()
        fn()
        latencies.append(time.perf_counter() - start)
    return latencies


def summarise(latencies: list[float], unit: str = "us") -> dict[str, float]:
    scaled = [t * UNITS[unit] for t in latencies]
    cuts = quantiles(scaled, n=100)
    return {"p50": cuts[49], "p95": cuts[94], "p99": cuts[98], "ops": len(latencies) / sum(latencies)}


def print_table(results: dict[str, dict[str, float]], unit: str = "us"):
    console = Console()
    table = Table(title="Multiaddr Codec Benchmark", box=box.SIMPLE_HEAVY)
    table.add_column("Operation")
    table.add_column(f"p50 ({unit}, ↓)")
    table.add_column(f"p95 ({unit}, ↓)")
    table.add_column(f"p99 ({unit}, ↓)")
    table.add_column("Ops/s (↑)")
    for k, v in results.items():
        table.add_row(k, f"{v['p50']:.2f}", f"{v['p95']:.2f}", f"{v['p99']:.2f}", f"{v['ops']:,.0f}")
    console.print(table)


def main():
    parser = argparse.ArgumentParser(description="Benchmark multiaddr codecs")
    parser.add_argument("--runs", type=int, default=10000, help="Number of calls per operation")
    parser.add_argument("--unit", choices=["us", "ms", "ns"], default="us", help="Latency unit")
    args = parser.parse_args()

    addrs = [Multiaddr(text) for text in ADDRESSES]
    packed = [addr.to_bytes() for addr in addrs]
    print(f"Benchmarking {args.runs} calls over {len(ADDRESSES)} addresses")

    results = {
        "string parse": time_calls("string parse", lambda: [Multiaddr(t) for t in ADDRESSES], args.runs),
        "binary parse": time_calls("binary parse", lambda: [Multiaddr(b) for b in packed], args.runs),
        "binary encode": time_calls("binary encode", lambda: [a.to_bytes() for a in addrs], args.runs),
        "string render": time_calls("string render", lambda: [str(Multiaddr(b)) for b in packed], args.runs),
    }
    print_table({k: summarise(v, args.unit) for k, v in results.items()}, args.unit)


if __name__ == "__main__":
    main()
