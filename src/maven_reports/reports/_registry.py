"""Report registry: decorator, storage, and lookup.

Report files register themselves by importing and using the @report
decorator. The __init__.py auto-discovers all .py files in this package
so no manual registration is needed.
"""

from dataclasses import dataclass
from typing import Callable


@dataclass
class Report:
    """A registered read-only report."""
    name: str
    title: str
    func: Callable
    row_type: type


_reports: list[Report] = []


def report(name: str, title: str, row_type: type):
    """Decorator to register a function as a named report."""
    def decorator(func: Callable) -> Callable:
        if any(r.name == name for r in _reports):
            raise ValueError(f"Report '{name}' is already registered")
        _reports.append(Report(
            name=name,
            title=title,
            func=func,
            row_type=row_type,
        ))
        return func
    return decorator


def get_all_reports() -> list[Report]:
    """Return all registered reports."""
    return list(_reports)


def get_report(name: str) -> Report:
    """Look up a report by name. Raises ValueError for unknown names."""
    for r in _reports:
        if r.name == name:
            return r
    known = ", ".join(r.name for r in _reports)
    raise ValueError(f"Unknown report '{name}' (known reports: {known})")
