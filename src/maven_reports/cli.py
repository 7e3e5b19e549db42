"""Command-line interface for maven-reports."""

import argparse
import logging
import sys

from .config import load_config

log = logging.getLogger(__name__)

# Every table read by at least one report
TABLES = [
    ("store", "Stores"),
    ("staff", "Staff"),
    ("address", "Addresses"),
    ("city", "Cities"),
    ("country", "Countries"),
    ("inventory", "Inventory"),
    ("film", "Films"),
    ("film_category", "Film categories"),
    ("category", "Categories"),
    ("customer", "Customers"),
    ("rental", "Rentals"),
    ("payment", "Payments"),
    ("investor", "Investors"),
    ("advisor", "Advisors"),
    ("actor_award", "Actor awards"),
]


def setup_logging(verbose: bool = False):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
        datefmt="%H:%M:%S",
    )


def format_value(value) -> str:
    if value is None:
        return "NULL"
    return str(value)


def print_result(result, out=None):
    """Print a report result as a tab-separated table with a header line."""
    from .models import as_tuple, column_names

    out = out or sys.stdout
    print(f"# {result.report.name}: {result.report.title}", file=out)
    print("\t".join(column_names(result.report.row_type)), file=out)
    for row in result.rows:
        print("\t".join(format_value(v) for v in as_tuple(row)), file=out)
    print(file=out)


def cmd_list(args):
    """List the available reports."""
    from .reports import get_all_reports

    for rep in get_all_reports():
        print(f"{rep.name:<22} {rep.title}")


def cmd_run(args):
    """Run one or more reports and print their rows."""
    config = load_config(args.env_file)
    config.validate()

    from .reports import get_all_reports, get_report

    if args.all:
        reps = get_all_reports()
    elif args.names:
        reps = [get_report(name) for name in args.names]
    else:
        raise ValueError("Name at least one report, or pass --all")

    from .db import init_pool, close_pool
    from .tracing import init_tracing, shutdown_tracing
    from .runner import run_reports

    init_tracing(config)
    init_pool(config)

    try:
        results = run_reports(reps, workers=config.worker_threads)
    finally:
        close_pool()
        shutdown_tracing()

    for result in results:
        if result.ok:
            print_result(result)

    if not all(r.ok for r in results):
        sys.exit(1)


def cmd_check(args):
    """Verify configuration, database connectivity, and the report tables."""
    config = load_config(args.env_file)
    config.validate()

    from .db import init_pool, close_pool, connection

    log.info("Configuration loaded successfully")
    log.info("  Database: %s@%s:%d/%s", config.db_user, config.db_host, config.db_port, config.db_name)
    log.info("  Schema: %s", config.db_schema)
    log.info("  Pool size: %d-%d", config.pool_min_size, config.pool_max_size)
    log.info("  Worker threads: %d", config.worker_threads)
    log.info("  OTel: %s", "enabled" if config.otel_enabled else "disabled")

    init_pool(config)
    try:
        with connection() as conn:
            cur = conn.cursor()

            cur.execute("SELECT version()")
            version = cur.fetchone()[0]
            log.info("  PostgreSQL: %s", version.split(",")[0])

            for table, label in TABLES:
                cur.execute(f"SELECT count(*) FROM {table}")
                count = cur.fetchone()[0]
                log.info("  %-16s %d rows", label, count)

            cur.close()

        log.info("All checks passed")
    finally:
        close_pool()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="maven-reports",
        description="Read-only business reports over the MavenMovies database",
    )
    parser.add_argument("--env-file", help="Path to .env file (default: auto-detect)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    # list
    p_list = subparsers.add_parser("list", help="List available reports")
    p_list.set_defaults(func=cmd_list)

    # run
    p_run = subparsers.add_parser("run", help="Run reports and print their rows")
    p_run.add_argument("names", nargs="*", metavar="NAME", help="Report name(s) from 'list'")
    p_run.add_argument("--all", action="store_true", help="Run every report")
    p_run.set_defaults(func=cmd_run)

    # check
    p_check = subparsers.add_parser("check", help="Verify config and database connectivity")
    p_check.set_defaults(func=cmd_check)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.")
        sys.exit(1)
    except ValueError as e:
        log.error(str(e))
        sys.exit(1)
    except Exception as e:
        log.error("Fatal error: %s", e, exc_info=True)
        sys.exit(1)
