import argparse
import logging
import os
import random
import sys
import time
from typing import Dict, Any, List

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from iterating import PeekableIterator, Stop, UnequalLengthError, combinators, sequences
from lazy_iterator import IteratorObject

DEFAULT_SIZE = int(os.getenv("DEMO_SIZE", "1000"))

logger = logging.getLogger("demo")


def generate_large_dataset(size: int) -> List[Dict[str, Any]]:
    """Generate synthetic sales records"""
    categories = ["electronics", "clothing", "books", "home", "automotive"]
    regions = ["north", "south", "east", "west"]
    return [
        {
            "id": f"record_{i}",
            "category": random.choice(categories),
            "region": random.choice(regions),
            "value": float(random.randint(10, 1000)),
            "quantity": random.randint(1, 10),
        }
        for i in range(size)
    ]


def demo_combinators(size: int) -> None:
    """Demonstrate the primitive combinators"""
    print("\n" + "=" * 60)
    print("🔧 COMBINATOR DEMONSTRATION")
    print("=" * 60)

    print(f"range(0, 5):                 {combinators.spread(sequences.range(0, 5))}")
    print(f"range(0, 5, 1, True):        {combinators.spread(sequences.range(0, 5, 1, True))}")
    print(f"range(5, 0, -1):             {combinators.spread(sequences.range(5, 0, -1))}")
    print(f"repeat('ab', 3):             {combinators.spread(sequences.repeat('ab', 3))}")
    print(f"sum_cumulatively([1,2,3,4]): {combinators.spread(combinators.sum_cumulatively(iter([1, 2, 3, 4])))}")
    print(f"reverse('lazy'):             {''.join(combinators.reverse(iter('lazy')))}")

    total = combinators.reduce(
        iter([1, 2, 3, 4, 5]),
        lambda acc, e: Stop(acc) if e > 3 else acc + e,
        0,
    )
    print(f"reduce with early stop:      {total}")

    records = generate_large_dataset(size)
    start_time = time.time()
    any_expensive = combinators.check_any_fulfills(iter(records), lambda r: r["value"] > 990)
    all_positive = combinators.check_all_fulfill(iter(records), lambda r: r["quantity"] > 0)
    print(f"any value > 990:             {any_expensive}")
    print(f"all quantities positive:     {all_positive}")
    print(f"   Checked {size} records in {time.time() - start_time:.3f} seconds")


def demo_facade(size: int) -> None:
    """Demonstrate fluent chaining through IteratorObject"""
    print("\n" + "=" * 60)
    print("🔄 FAÇADE DEMONSTRATION")
    print("=" * 60)

    records = generate_large_dataset(size)
    print(f"✅ Generated {len(records)} records")

    chunks = (IteratorObject(records)
        .filter(lambda x: x["value"] > 100)  # Filter high-value items
        .filter(lambda x: x["category"] in ["electronics", "automotive"])
        .map(lambda x: {**x, "total_value": x["value"] * x["quantity"]})
        .filter(lambda x: x["total_value"] > 500)
        .take(20)
        .chunk(5)
        .spread())

    for index, chunk in enumerate(chunks, start=1):
        print(f"   Chunk {index}: {len(chunk)} items")

    def moving_average(window, element):
        window = (window + [element])[-3:]
        return window, round(sum(window) / len(window), 2)

    averages = (IteratorObject(records)
        .map(lambda x: x["value"])
        .smear(moving_average, [])
        .take(5)
        .spread())
    print(f"   Moving average of first values: {averages}")

    running = (IteratorObject.create_summing_cumulatively(
            IteratorObject(records).map(lambda x: x["quantity"]))
        .take(5)
        .spread())
    print(f"   Running quantity total: {running}")


def demo_peekable() -> None:
    """Demonstrate one-element lookahead"""
    print("\n" + "=" * 60)
    print("👀 PEEKABLE DEMONSTRATION")
    print("=" * 60)

    peekable = PeekableIterator("aaabccdd")
    runs = []
    while peekable:
        current = next(peekable)
        length = 1
        while peekable.peek().has_value and peekable.peek().value == current:
            next(peekable)
            length += 1
        runs.append(f"{current}x{length}")
    print(f"   Run-length encoding of 'aaabccdd': {runs}")


def demo_zip() -> None:
    """Demonstrate strict zipping"""
    print("\n" + "=" * 60)
    print("🤝 ZIP DEMONSTRATION")
    print("=" * 60)

    pairs = IteratorObject.create_zipping((iter([1, 2, 3]), iter("abc"))).spread()
    print(f"   zip([1,2,3], 'abc'): {pairs}")

    try:
        combinators.spread(combinators.zip((iter([1, 2, 3]), iter("ab"))))
    except UnequalLengthError as exc:
        print(f"   zip([1,2,3], 'ab') raised: {exc}")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Demo of the lazy iterator combinators")
    parser.add_argument(
        "--mode",
        choices=["all", "combinators", "facade", "peekable", "zip"],
        default="all",
        help="Demo mode to run (default: all)"
    )
    parser.add_argument(
        "--size", type=int, default=DEFAULT_SIZE, help="Number of generated records (default: %(default)s)"
    )
    parser.add_argument(
        "--log-level", default=os.getenv("LOG_LEVEL", "INFO"), help="Logging level (default: %(default)s)"
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(message)s")

    try:
        if args.mode in ("all", "combinators"):
            demo_combinators(args.size)
        if args.mode in ("all", "facade"):
            demo_facade(args.size)
        if args.mode in ("all", "peekable"):
            demo_peekable()
        if args.mode in ("all", "zip"):
            demo_zip()
    except Exception:
        logger.exception("Demo execution failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
