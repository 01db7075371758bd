"""Brand extractor CLI.

Commands:
- run: scrape every configured endpoint, reconcile against the known
  brands, write processed.json and failures.json
- reconcile: only compare known brands against the configuration
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import Settings
from .errors import ConfigurationError
from .extractor import EndpointExtractor
from .services import BatchRunner, ReconciliationReporter
from .sources import DocumentFetcher
from .storage import load_brand_config, load_known_brands, write_json
from .transformer import ContentTransformerClient
from .types.brand import FilterMissPolicy

logger = logging.getLogger("brand_extractor")


def add_common_logging(parser: argparse.ArgumentParser):
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")


def add_input_args(parser: argparse.ArgumentParser, settings: Settings):
    parser.add_argument("--brands", default=settings.brands_file, help="Brands to scrape (endpoints + ruleSets)")
    parser.add_argument("--known", default=settings.known_file, help="Known brands list (JSON array of objects with uuid)")
    parser.add_argument("--strict-rules", action="store_true", default=settings.strict_rules,
                        help="Reject rule sets with an unknown extract kind or a broken selector")


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Scrape brand pages with declarative selector rules")
    subparsers = parser.add_subparsers(dest="command")

    run_p = subparsers.add_parser("run", help="Extract all configured brands")
    add_common_logging(run_p)
    add_input_args(run_p, settings)
    run_p.add_argument("--processed", default=settings.processed_file, help="Output file for processed records")
    run_p.add_argument("--failures", default=settings.failures_file, help="Output file for failures")
    run_p.add_argument("--transformer-url", default=settings.transformer_url, help="Content transformer endpoint")
    run_p.add_argument("--fetch-timeout", type=float, default=settings.fetch_timeout, help="Page fetch timeout in seconds")
    run_p.add_argument("--transformer-timeout", type=float, default=settings.transformer_timeout,
                       help="Transformer request timeout in seconds")
    run_p.add_argument("--workers", type=int, default=settings.max_workers, help="Endpoints fetched in parallel")
    run_p.add_argument(
        "--filter-miss",
        choices=[p.value for p in FilterMissPolicy],
        default=settings.filter_miss_policy.value,
        help="Field value when a filter pattern does not match",
    )

    rec_p = subparsers.add_parser("reconcile", help="Compare known brands with configured endpoints")
    add_common_logging(rec_p)
    add_input_args(rec_p, settings)
    return parser


def cmd_run(args, settings: Settings) -> int:
    config = load_brand_config(args.brands, strict=args.strict_rules)
    known_brands = load_known_brands(args.known)

    fetcher = DocumentFetcher(timeout=args.fetch_timeout, user_agent=settings.user_agent)
    transformer = ContentTransformerClient(
        args.transformer_url,
        timeout=args.transformer_timeout,
        encoding=settings.transformer_encoding,
    )
    extractor = EndpointExtractor(transformer, FilterMissPolicy(args.filter_miss))
    runner = BatchRunner(extractor, fetcher, max_workers=args.workers)
    try:
        result = runner.run(config.endpoints, config.rule_sets)
    finally:
        fetcher.close()
        transformer.close()

    ReconciliationReporter().report(known_brands, config.endpoints)

    write_json(args.processed, result.processed)
    write_json(args.failures, result.failures)

    if result.failures:
        logger.error(f"There were {len(result.failures)} failures, see {args.failures} for details")
    logger.info(f"Total of {len(result.processed)} brands processed and written to {args.processed}")
    return 0


def cmd_reconcile(args, settings: Settings) -> int:
    config = load_brand_config(args.brands, strict=args.strict_rules)
    known_brands = load_known_brands(args.known)
    report = ReconciliationReporter().report(known_brands, config.endpoints)
    return 0 if report.in_sync else 1


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        logging.basicConfig(level=logging.INFO)
        logger.error(str(e))
        return 2
    parser = build_parser(settings)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "verbose", False) or settings.debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    if not args.command:
        parser.print_help()
        return 1

    commands = {
        "run": cmd_run,
        "reconcile": cmd_reconcile,
    }
    try:
        return commands[args.command](args, settings)
    except ConfigurationError as e:
        logger.error(str(e))
        return 2


if __name__ == "__main__":
    sys.exit(main())
