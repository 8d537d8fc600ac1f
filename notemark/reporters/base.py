"""
报告器基类 - 定义报告器接口
"""

from typing import Protocol

from notemark.core.tables import TableLocation
from notemark.core.urls import ExtractedUrl


class Reporter(Protocol):
    """报告器协议"""

    def report_urls(self, urls: list[ExtractedUrl], target: str) -> None:
        """输出提取到的 URL"""
        ...

    def report_tables(self, tables: list[TableLocation], target: str) -> None:
        """输出检测到的表格"""
        ...
