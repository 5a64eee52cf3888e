"""Output rendering for osv-scanner."""

from .formatters import JSONFormatter, TableFormatter
from .reporter import OutputError, Reporter

__all__ = [
    "JSONFormatter",
    "TableFormatter",
    "OutputError",
    "Reporter",
]
