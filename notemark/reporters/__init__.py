"""
Reporters Layer - 报告层

包含 Rich 终端报告器和 JSON 报告器。
"""

from notemark.reporters.base import Reporter
from notemark.reporters.rich_reporter import RichReporter
from notemark.reporters.json_reporter import JsonReporter

__all__ = [
    "Reporter",
    "RichReporter",
    "JsonReporter",
]
