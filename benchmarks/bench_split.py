"""Time `parse` on a representative mixed-quoting command line.

Usage:
    python benchmarks/bench_split.py [iterations]
"""

from __future__ import annotations

import sys
import timeit

from quotesplit import parse

BENCH_INPUT = "ls -l -a -h -b -c -d 'ls -l' \"ls -l\""


def main(argv: list[str] | None = None) -> int:
    args = argv if argv is not None else sys.argv[1:]
    number = int(args[0]) if args else 100_000

    total = timeit.timeit(lambda: parse(BENCH_INPUT), number=number)
    print(f"parse: {number} iterations in {total:.3f}s ({total / number * 1e6:.2f} us/call)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
