"""Report execution: borrow a pooled connection, run, time, and trace.

Reports share nothing but the connection pool, so several of them can run
at once on a thread pool, each on its own borrowed connection.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from .db import connection
from .reports import Report
from .tracing import report_span

log = logging.getLogger(__name__)


@dataclass
class ReportResult:
    """Outcome of one report execution."""
    report: Report
    rows: list = field(default_factory=list)
    elapsed: float = 0.0
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def run_report(rep: Report) -> list:
    """Run a single report on a pooled connection. Store errors propagate."""
    start = time.perf_counter()
    with report_span(rep.name) as span:
        with connection() as conn:
            rows = rep.func(conn)
        if span:
            span.set_attribute("report.rows", len(rows))
    log.info("Report '%s' returned %d rows in %.3fs",
             rep.name, len(rows), time.perf_counter() - start)
    return rows


def _execute(rep: Report) -> ReportResult:
    start = time.perf_counter()
    try:
        rows = run_report(rep)
    except Exception as exc:
        log.warning("Report '%s' failed", rep.name, exc_info=True)
        return ReportResult(report=rep, elapsed=time.perf_counter() - start, error=exc)
    return ReportResult(report=rep, rows=rows, elapsed=time.perf_counter() - start)


def run_reports(reps: list[Report], workers: int = 1) -> list[ReportResult]:
    """Run several reports and return their results in the requested order.

    A failing report does not stop the others; its exception is kept on
    its ReportResult.
    """
    if workers > 1 and len(reps) > 1:
        log.debug("Running %d reports on %d worker threads", len(reps), workers)
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="report") as pool:
            results = list(pool.map(_execute, reps))
    else:
        results = [_execute(rep) for rep in reps]

    _log_summary(results)
    return results


def _log_summary(results: list[ReportResult]) -> None:
    failed = sum(1 for r in results if not r.ok)
    log.info("=" * 55)
    log.info("  Reports: %d ok, %d failed", len(results) - failed, failed)
    log.info("  %-30s %8s %10s", "Report", "Rows", "Seconds")
    log.info("  %-30s %8s %10s", "-" * 30, "-" * 8, "-" * 10)
    for r in results:
        rows = str(len(r.rows)) if r.ok else "ERROR"
        log.info("  %-30s %8s %10.3f", r.report.name, rows, r.elapsed)
    log.info("=" * 55)
