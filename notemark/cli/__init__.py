"""
CLI Layer - 命令行接口层

提供命令行入口。
"""

from notemark.cli.app import app, urls, title, tables, version

__all__ = [
    "app",
    "urls",
    "title",
    "tables",
    "version",
]
