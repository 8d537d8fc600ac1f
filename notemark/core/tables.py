"""
表格模块 - 生成 GitHub 风格的 Markdown 表格，并检测文档中的表格结构

生成规则：
- 表头行：每个标签右侧补空格到至少 5 个字符
- 分隔行：根据对齐方式生成 -----、:---:、----:
- 数据行：按表头 name 读取单元格，默认转义，补齐宽度
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Mapping, Optional, Union

from notemark.core.escaping import escape_table_cell
from notemark.core.patterns import MIN_CELL_WIDTH, TABLE_DIVIDER_INVALID_PATTERN

logger = logging.getLogger(__name__)


class TableJustify(Enum):
    """列对齐方式"""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


# 对齐方式 -> 分隔行单元格
DIVIDER_CELLS: dict[TableJustify, str] = {
    TableJustify.LEFT: "-----",
    TableJustify.CENTER: ":---:",
    TableJustify.RIGHT: "----:",
}


@dataclass(frozen=True)
class TableHeader:
    """
    表头描述

    Attributes:
        name: 从行数据中读取值时使用的键
        label: 表头显示文本
        value_filter: 可选的值转换函数，在转义之前调用
        disable_escape: 是否跳过单元格转义
        justify: 对齐方式，默认左对齐
    """
    name: str
    label: str
    value_filter: Optional[Callable[[Optional[str]], Optional[str]]] = None
    disable_escape: bool = False
    justify: Optional[TableJustify] = None


# 行数据：映射或 (键, 值) 序列
TableRow = Union[Mapping[str, str], Iterable[tuple[str, str]]]


@dataclass
class TableLocation:
    """
    文档中检测到的表格

    Attributes:
        line_number: 表头所在行号 (1-based)
        columns: 表头列数
        header: 表头行原文
        divider: 分隔行原文
    """
    line_number: int
    columns: int
    header: str
    divider: str


def _pad_cell(value: str) -> str:
    return value.ljust(MIN_CELL_WIDTH)


def _format_row(cells: list[str]) -> str:
    return f"| {' | '.join(cells)} |"


def _cell_value(header: TableHeader, values: Mapping[str, str]) -> str:
    value = values.get(header.name)
    if header.value_filter:
        value = header.value_filter(value)
    value = value or ''
    if not header.disable_escape:
        value = escape_table_cell(value)
    return _pad_cell(value)


def create_markdown_table(headers: list[TableHeader], rows: list[TableRow]) -> str:
    """
    生成 Markdown 表格

    每一行的列数都等于表头数量，行中缺少的键输出为空单元格。

    Args:
        headers: 表头描述列表
        rows: 行数据列表

    Returns:
        Markdown 表格（行之间用换行分隔，没有结尾换行）
    """
    output: list[str] = []

    header_cells = [_pad_cell(header.label) for header in headers]
    divider_cells = [DIVIDER_CELLS[header.justify or TableJustify.LEFT] for header in headers]

    output.append(_format_row(header_cells))
    output.append(_format_row(divider_cells))

    for row in rows:
        values = row if isinstance(row, Mapping) else dict(row)
        output.append(_format_row([_cell_value(header, values) for header in headers]))

    return '\n'.join(output)


def count_table_columns(line: Optional[str]) -> int:
    """
    计算表格行的列数

    统计 | 的数量，行首和行尾的 | 不计入列分隔符。

    Args:
        line: 表格行

    Returns:
        列数，空行返回 0
    """
    if not line:
        return 0

    trimmed = line.strip()
    pipes = line.count('|')

    if trimmed.startswith('|'):
        pipes -= 1
    if trimmed.endswith('|'):
        pipes -= 1

    return pipes + 1


def matching_table_divider(header: Optional[str], divider: Optional[str]) -> bool:
    """
    判断分隔行是否与表头匹配

    分隔行只能包含空白、-、: 和 |，且列数不少于表头列数。

    Args:
        header: 表头行
        divider: 分隔行

    Returns:
        是否匹配
    """
    if not header or not divider:
        return False

    if TABLE_DIVIDER_INVALID_PATTERN.search(divider):
        return False

    columns = count_table_columns(header)
    divider_columns = count_table_columns(divider)
    return divider_columns > 0 and divider_columns >= columns


def find_tables(md: str) -> list[TableLocation]:
    """
    查找文档中的表格

    表头行必须包含 |，且紧跟一行与之匹配的分隔行。

    Args:
        md: Markdown 内容

    Returns:
        TableLocation 列表，按文档顺序排列
    """
    if not md:
        return []

    tables: list[TableLocation] = []
    lines = md.split('\n')

    for i, line in enumerate(lines[:-1]):
        divider = lines[i + 1]
        if '|' not in line or not line.strip(' \t|-:'):
            continue
        if matching_table_divider(line, divider):
            tables.append(TableLocation(
                line_number=i + 1,
                columns=count_table_columns(line),
                header=line,
                divider=divider,
            ))

    logger.debug(f"Found {len(tables)} tables in {len(lines)} lines")
    return tables
