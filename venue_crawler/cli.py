"""
Command Line Interface

Entry point for scanning an editor snapshot from the command line.

Usage:
    python -m venue_crawler snapshot.json
    python -m venue_crawler snapshot.json --extract critical -o results.json
    python -m venue_crawler snapshot.json --extract issues --timeout 5 --log-level INFO
"""

import argparse
import asyncio
import json
import logging
import sys

from .analyzer import severity_label
from .config import REQUEST_TIMEOUT
from .config_manager import CrawlerConfig
from .crawler import VenueCrawler
from .exceptions import VenueCrawlerError
from .host import SnapshotHost
from .models import Severity

# --extract choice -> severities selected for extraction
EXTRACT_SELECTIONS = {
    'none': (),
    'critical': (Severity.CRITICAL,),
    'issues': (Severity.MINOR, Severity.MAJOR, Severity.CRITICAL),
    'all': tuple(Severity),
}


def print_statistics(stats):
    print(f"\nTotal Venues Scanned: {stats['total']}")
    print(f"  - Complete:     {stats['complete']}")
    print(f"  - Minor Issues: {stats['minor']}")
    print(f"  - Major Issues: {stats['major']}")
    print(f"  - Critical:     {stats['critical']}")


def print_extraction(entry):
    extracted = entry.extracted
    if extracted is None:
        return
    if extracted.is_error:
        print(f"    [!] {extracted.error} ({extracted.search_query})")
    else:
        print(f"    [OK] {extracted.method.value}: phone={extracted.phone or '-'} "
              f"website={extracted.website or '-'} address={extracted.address or '-'}")


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Venue Data Crawler",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m venue_crawler snapshot.json
  python -m venue_crawler snapshot.json --extract critical
  python -m venue_crawler snapshot.json --extract issues -o results.json
        """
    )

    parser.add_argument(
        "snapshot",
        help="JSON snapshot of the editor model (venues, cities, states)"
    )
    parser.add_argument(
        "-o", "--output",
        help="Write the scan results as JSON to this path"
    )
    parser.add_argument(
        "--extract",
        choices=sorted(EXTRACT_SELECTIONS),
        default="none",
        help="Look up websites for venues of these severities (default: none)"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=REQUEST_TIMEOUT,
        help=f"Search and fetch timeout in seconds (default: {REQUEST_TIMEOUT})"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress progress output"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    try:
        config = CrawlerConfig(timeout=args.timeout, verbose=not args.quiet)
        verbose = config.verbose
        crawler = VenueCrawler(config)

        report = crawler.scan_host(SnapshotHost.from_file(args.snapshot))
        if not report.available:
            print("\nError: editor model not ready (snapshot has no venues list)", file=sys.stderr)
            return 1

        if verbose:
            print(f"Scanned {report.scanned} venues (skipped {report.skipped} excluded/unnamed venues)")
            print_statistics(crawler.statistics())

        severities = EXTRACT_SELECTIONS[args.extract]
        targets = [e for e in crawler.entries() if e.severity in severities]
        if targets:
            if verbose:
                print(f"\nExtracting data for {len(targets)} venues...")
            asyncio.run(crawler.extract_many(e.venue_id for e in targets))
            if verbose:
                for i, entry in enumerate(targets):
                    print(f"\n  [{i+1}/{len(targets)}] {entry.name[:40]} ({severity_label(entry.severity)})")
                    print_extraction(entry)

        if args.output:
            with open(args.output, 'w', encoding='utf-8') as f:
                json.dump(crawler.to_dict(), f, indent=2, ensure_ascii=False)
            if verbose:
                print(f"\nSaved results to {args.output}")

        return 0

    except VenueCrawlerError as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n\nInterrupted by user.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
