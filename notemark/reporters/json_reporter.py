"""
JSON 报告器 - 输出 JSON 格式报告
"""

import json
import sys
from typing import TextIO

from notemark.core.tables import TableLocation
from notemark.core.urls import ExtractedUrl, UrlKind


class JsonReporter:
    """JSON 报告器"""

    def __init__(self, output: TextIO | None = None):
        self.output = output or sys.stdout

    def report_urls(self, urls: list[ExtractedUrl], target: str) -> None:
        """生成 URL 列表的 JSON 报告"""
        report_data = {
            "target": target,
            "urls": [
                {
                    "url": item.url,
                    "kind": item.kind.name.lower(),
                }
                for item in urls
            ],
            "summary": {
                "total": len(urls),
                "images": sum(1 for item in urls if item.kind == UrlKind.IMAGE),
                "anchors": sum(1 for item in urls if item.kind == UrlKind.ANCHOR),
            },
        }
        self._write(report_data)

    def report_tables(self, tables: list[TableLocation], target: str) -> None:
        """生成表格列表的 JSON 报告"""
        report_data = {
            "target": target,
            "tables": [
                {
                    "line_number": table.line_number,
                    "columns": table.columns,
                    "header": table.header,
                    "divider": table.divider,
                }
                for table in tables
            ],
            "summary": {
                "total": len(tables),
            },
        }
        self._write(report_data)

    def _write(self, report_data: dict) -> None:
        json_str = json.dumps(report_data, indent=2, ensure_ascii=False)
        print(json_str, file=self.output)
