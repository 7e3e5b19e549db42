"""Report auto-discovery and public API.

Importing this package automatically discovers and loads all report
files in this directory. A new report is a new .py file with a
@report-decorated function — no manual registration required.

Public API (re-exported from _registry):
    report          — decorator to register a report
    get_all_reports — return all registered reports
    get_report      — look up a report by name
    Report          — the report dataclass
"""

import importlib
import pkgutil

from ._registry import Report, get_all_reports, get_report, report  # noqa: F401

# Auto-discover all modules in this package to trigger @report registration
for _info in sorted(pkgutil.iter_modules(__path__), key=lambda i: i.name):
    if not _info.name.startswith("_"):
        importlib.import_module(f".{_info.name}", __package__)
