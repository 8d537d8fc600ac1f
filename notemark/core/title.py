"""
标题提取 - 从笔记正文的第一行生成简短标题
"""

from notemark.core.patterns import (
    TITLE_MARKER_PATTERN,
    TITLE_LINK_PATTERN,
    TITLE_EMPTY_LINK_PATTERN,
    TITLE_MAX_LENGTH,
)


def title_from_body(body: str) -> str:
    """
    从正文生成标题

    处理顺序：
    1. 取去除首尾空白后的第一行
    2. 去掉行首的标题、列表、强调标记（#、*、`、- 和空白）
    3. [label](url) 和 ![label](url) 替换为 label
    4. [](url) 替换为 url
    5. 截断到 80 个字符

    Args:
        body: 笔记正文

    Returns:
        标题，正文为空时返回空字符串
    """
    if not body:
        return ''

    first_line = body.strip().split('\n')[0].strip()
    title = TITLE_MARKER_PATTERN.sub('', first_line, count=1)
    title = TITLE_LINK_PATTERN.sub(r'\1', title)
    title = TITLE_EMPTY_LINK_PATTERN.sub(r'\1', title)
    return title[:TITLE_MAX_LENGTH]
