"""
列表行识别 - 判断单行文本是否为列表项，并提取列表标记和序号

支持的列表标记：
- 无序列表: "* ", "+ ", "- "
- 任务列表: "- [ ] ", "- [x] "（也支持 * 和 +）
- 有序列表: "1. ", "1) "
"""

from dataclasses import dataclass
from typing import Optional

from notemark.core.patterns import LIST_ITEM_PATTERN, EMPTY_LIST_ITEM_PATTERN


@dataclass(frozen=True)
class ListMatch:
    """
    列表项匹配结果

    Attributes:
        leading_whitespace: 列表标记前的缩进
        token: 列表标记（包含其后的一个空白字符），如 "- "、"3. "
        ordinal: 有序列表的序号，其他列表为 None
        trailing_whitespace: 列表标记之后的额外空白
    """
    leading_whitespace: str
    token: str
    ordinal: Optional[int]
    trailing_whitespace: str


def match_list_item(line: str) -> Optional[ListMatch]:
    """
    匹配列表行

    Args:
        line: 单行文本

    Returns:
        ListMatch 对象，不是列表项时返回 None
    """
    if not line:
        return None

    match = LIST_ITEM_PATTERN.match(line)
    if not match:
        return None

    ordinal = match.group('ordinal')
    return ListMatch(
        leading_whitespace=match.group('leading'),
        token=match.group('token'),
        ordinal=int(ordinal) if ordinal is not None else None,
        trailing_whitespace=match.group('trailing'),
    )


def is_list_item(line: str) -> bool:
    return match_list_item(line) is not None


def is_empty_list_item(line: str) -> bool:
    """判断是否为只有列表标记、没有内容的列表项（如 "- "）"""
    if not line:
        return False
    return EMPTY_LIST_ITEM_PATTERN.match(line) is not None


def extract_list_token(line: str) -> str:
    """返回列表标记原文，不是列表项时返回空字符串"""
    match = match_list_item(line)
    return match.token if match else ''


def ol_line_number(line: str) -> int:
    """
    返回有序列表项的序号

    不是有序列表项时返回 0。序号本身为 0 时同样返回 0，
    需要区分两者时请使用 match_list_item。
    """
    match = match_list_item(line)
    if match is None or match.ordinal is None:
        return 0
    return match.ordinal
