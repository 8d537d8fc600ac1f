"""
Rich 终端报告器 - 使用 Rich 库输出彩色终端表格
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from notemark.core.tables import TableLocation
from notemark.core.urls import ExtractedUrl, UrlKind


# URL 类型 -> (图标, 显示名, 颜色)
KIND_STYLES = {
    UrlKind.IMAGE: ("🖼", "image", "magenta"),
    UrlKind.ANCHOR: ("🔗", "link", "cyan"),
}


class RichReporter:
    """Rich 终端报告器"""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def report_urls(self, urls: list[ExtractedUrl], target: str) -> None:
        """以表格形式输出 URL"""
        self.console.print()
        if not urls:
            self.console.print(f"[yellow]No URLs found in {escape(target)}[/yellow]")
            return

        table = Table(
            title=f"🔗 URLs in {escape(target)}",
            show_header=True,
            header_style="bold cyan",
        )
        table.add_column("#", justify="right", style="dim", width=4)
        table.add_column("Kind", width=10)
        table.add_column("URL", overflow="fold")

        for i, item in enumerate(urls, 1):
            icon, label, color = KIND_STYLES[item.kind]
            table.add_row(str(i), f"[{color}]{icon} {label}[/{color}]", Text(item.url))

        self.console.print(table)
        self._print_summary(urls)

    def report_tables(self, tables: list[TableLocation], target: str) -> None:
        """以表格形式输出检测到的 Markdown 表格"""
        self.console.print()
        if not tables:
            self.console.print(f"[yellow]No tables found in {escape(target)}[/yellow]")
            return

        table = Table(
            title=f"📋 Tables in {escape(target)}",
            show_header=True,
            header_style="bold cyan",
        )
        table.add_column("Line", justify="right", width=6)
        table.add_column("Columns", justify="right", width=8)
        table.add_column("Header", overflow="fold")

        for location in tables:
            table.add_row(
                str(location.line_number),
                f"[bold]{location.columns}[/bold]",
                Text(location.header.strip()),
            )

        self.console.print(table)

    def _print_summary(self, urls: list[ExtractedUrl]) -> None:
        images = sum(1 for item in urls if item.kind == UrlKind.IMAGE)
        anchors = len(urls) - images
        self.console.print(
            f"[dim]{len(urls)} URLs: {images} images, {anchors} links[/dim]"
        )
