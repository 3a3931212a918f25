#!/usr/bin/env python3
"""
Benchmark Runner

Calculates precise benchmarks and exact targets from five scraped
competitor pages stored as JSON.

Input file: a JSON list of 5 competitor records, or an object with a
"competitors" key holding that list.

Usage:
    python scripts/run_benchmarks.py competitors.json

    # Write the full payload and average LSI keywords over all 5 competitors:
    python scripts/run_benchmarks.py competitors.json \
        --output targets.json \
        --lsi-zero-fill
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def run_benchmarks(input_path: str, output_path: str = None, lsi_zero_fill: bool = None) -> int:
    """Run aggregation for one input file. Returns a process exit code."""

    load_dotenv()

    from src.benchmarks import BenchmarkAggregator, ValidationError
    from src.utils.config import get_settings

    if lsi_zero_fill is None:
        lsi_zero_fill = get_settings().BENCHMARK_LSI_ZERO_FILL

    path = Path(input_path)
    if not path.exists():
        print(f"ERROR: Input file not found: {path}")
        return 1

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    competitors = data.get("competitors", []) if isinstance(data, dict) else data

    aggregator = BenchmarkAggregator(lsi_zero_fill=lsi_zero_fill)
    try:
        benchmarks, targets = aggregator.calculate_all(competitors)
    except ValidationError as e:
        print(f"ERROR: {e}")
        return 2

    report = aggregator.build_report(competitors, targets)

    print(f"\n{'='*70}")
    print("COMPETITOR BENCHMARKS")
    print(f"{'='*70}")
    print(f"Word count:       {targets.target_word_count}")
    print(f"Keyword density:  {targets.target_keyword_density:.3f}%")
    print(f"Headings:         {targets.target_optimized_headings}")
    print(f"LSI targets:      {len(targets.lsi_keyword_targets)}")
    print(f"Entity targets:   {len(targets.entity_integration_targets)}")
    print(f"Report:           {report.summary}")
    for issue in report.issues:
        print(f"  - {issue}")
    print(f"{'='*70}\n")

    if output_path:
        payload = {
            "benchmarks": benchmarks.to_dict(),
            "targets": targets.to_dict(),
            "report": report.to_dict(),
        }
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)
        logger.info(f"Wrote benchmark payload to {output_path}")

    return 0


def main():
    parser = argparse.ArgumentParser(
        description="Calculate competitor benchmarks and exact content targets"
    )
    parser.add_argument(
        "input",
        help="JSON file with exactly 5 competitor records"
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Write benchmarks, targets and report as JSON (optional)"
    )
    parser.add_argument(
        "--lsi-zero-fill",
        action="store_true",
        default=None,
        help="Average LSI keywords over all 5 competitors (absent = 0)"
    )

    args = parser.parse_args()

    sys.exit(run_benchmarks(
        input_path=args.input,
        output_path=args.output,
        lsi_zero_fill=args.lsi_zero_fill,
    ))


if __name__ == "__main__":
    main()
