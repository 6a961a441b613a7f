"""
Performance benchmarks for ISBN Parser.
"""

import time
import statistics
from typing import Tuple

from isbn_parser import parse_isbn, format_as_isbn13, load_ranges


def benchmark(func, iterations: int = 1000) -> Tuple[float, float, float]:
    """
    Run a benchmark and return timing statistics.

    Returns:
        (mean_ms, min_ms, max_ms)
    """
    times = []

    for _ in range(iterations):
        start = time.perf_counter()
        func()
        elapsed = time.perf_counter() - start
        times.append(elapsed * 1000)  # Convert to ms

    return (
        statistics.mean(times),
        min(times),
        max(times)
    )


def run_benchmarks():
    """Run all benchmarks and print results."""
    print("=" * 60)
    print("ISBN Parser Benchmarks")
    print("=" * 60)
    print()

    start = time.perf_counter()
    load_ranges(force_reload=True)
    print(f"Range table load: {(time.perf_counter() - start) * 1000:.3f}ms")
    print()

    test_cases = [
        ("ISBN-13 (1-digit group)", "9782207258040"),
        ("ISBN-10 with hyphens", "0-306-40615-2"),
        ("ISBN-10 with X", "080442957X"),
        ("2-digit group", "84-376-0494-X"),
        ("979 prefix", "979-10-91146-13-5"),
    ]

    print("Parsing:")
    print("-" * 60)

    for name, input_str in test_cases:
        mean, min_t, max_t = benchmark(
            lambda s=input_str: parse_isbn(s),
            iterations=1000
        )
        print(f"  {name:30} {mean:8.3f}ms avg ({min_t:.3f}-{max_t:.3f})")

    print()
    print("Throughput test (10000 ISBN-13 formats):")
    print("-" * 60)

    start = time.perf_counter()
    for _ in range(10000):
        format_as_isbn13("9782207258040")
    total = time.perf_counter() - start

    throughput = 10000 / total
    print(f"  Throughput: {throughput:.0f} formats/second")
    print(f"  Total time: {total:.3f}s for 10000 formats")

    print()
    print("=" * 60)


if __name__ == "__main__":
    run_benchmarks()
