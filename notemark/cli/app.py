"""
CLI 入口模块 - 使用 Typer 构建命令行界面

命令：
1. urls: 提取 Markdown 中的图片和链接 URL
2. title: 从笔记正文生成标题
3. tables: 检测文档中的表格
4. version: 显示版本
"""

import logging
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from notemark.core import (
    extract_file_urls,
    find_tables,
    title_from_body,
    ExtractOptions,
)
from notemark.reporters import RichReporter, JsonReporter

# 创建 Typer 应用实例
app = typer.Typer(
    name="notemark",
    help="notemark: Markdown utilities for note-taking applications.",
    add_completion=False,
)

# Rich Console 用于输出
console = Console()


def _setup_logging(verbose: bool) -> None:
    """verbose 模式下输出 DEBUG 日志"""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def read_source(target: str) -> str:
    """
    读取 Markdown 内容

    Args:
        target: 文件路径，"-" 表示标准输入

    Returns:
        文件内容
    """
    if target == "-":
        return sys.stdin.read()

    path = Path(target)
    if not path.exists():
        console.print(f"[red]Error:[/red] Path does not exist: {escape(target)}")
        raise typer.Exit(1)

    if not path.is_file():
        console.print(f"[red]Error:[/red] Path is not a file: {escape(target)}")
        raise typer.Exit(1)

    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error:[/red] Failed to read {escape(target)}: {escape(str(e))}")
        raise typer.Exit(1)


def get_reporter(format: str):
    """获取对应格式的报告器"""
    if format == "json":
        return JsonReporter()
    if format == "rich":
        return RichReporter(console)
    console.print(f"[red]Error:[/red] Unknown format: {escape(format)}")
    raise typer.Exit(1)


@app.command()
def urls(
    target: str = typer.Argument(
        ...,
        help="Markdown file to scan, or '-' for stdin",
    ),
    no_images: bool = typer.Option(
        False,
        "--no-images",
        help="Skip image URLs",
    ),
    no_anchors: bool = typer.Option(
        False,
        "--no-anchors",
        help="Skip link URLs",
    ),
    html: bool = typer.Option(
        False,
        "--html",
        help="Let the parser tokenize raw HTML",
    ),
    format: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich (default) or json",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show detailed output",
    ),
) -> None:
    """
    Extract image and link URLs from a markdown file.

    Examples:
        notemark urls note.md
        notemark urls note.md --no-anchors
        cat note.md | notemark urls - --format json
    """
    _setup_logging(verbose)
    reporter = get_reporter(format)
    content = read_source(target)

    if verbose:
        console.print(f"[dim]Read {len(content)} characters from {escape(target)}[/dim]")

    options = ExtractOptions(
        include_images=not no_images,
        include_anchors=not no_anchors,
        detailed_results=True,
        html=html,
    )
    results = extract_file_urls(content, options)

    reporter.report_urls(results, target)


@app.command()
def title(
    target: str = typer.Argument(
        ...,
        help="Markdown file, or '-' for stdin",
    ),
) -> None:
    """Print the title derived from the first line of a note body."""
    content = read_source(target)
    console.print(title_from_body(content), markup=False, highlight=False, soft_wrap=True)


@app.command()
def tables(
    target: str = typer.Argument(
        ...,
        help="Markdown file to scan, or '-' for stdin",
    ),
    format: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich (default) or json",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show detailed output",
    ),
) -> None:
    """List the markdown tables found in a file."""
    _setup_logging(verbose)
    reporter = get_reporter(format)
    content = read_source(target)

    if verbose:
        console.print(f"[dim]Scanning {content.count(chr(10)) + 1} lines...[/dim]")

    reporter.report_tables(find_tables(content), target)


@app.command()
def version() -> None:
    """Show the version of notemark."""
    from notemark import __version__
    console.print(f"[bold]notemark[/bold] v{__version__}")


if __name__ == "__main__":
    app()
