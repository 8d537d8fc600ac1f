"""
正则表达式模式定义

列表行、HTML 片段、链接和表格相关的匹配模式。
"""

import re

# 列表行: [缩进, 列表标记, 序号, 序号分隔符, 标记后的空白]
LIST_ITEM_PATTERN: re.Pattern = re.compile(
    r'^(?P<leading>\s*)'
    r'(?P<token>[*+-] \[[x ]\]\s|[*+-]\s|(?P<ordinal>[0-9]+)(?P<delimiter>[.)]\s))'
    r'(?P<trailing>\s*)'
)

# 空列表项: 只有列表标记和空白
EMPTY_LIST_ITEM_PATTERN: re.Pattern = re.compile(
    r'^(\s*)([*+-] \[[x ]\]|[*+-]|([0-9]+)[.)])(\s+)$'
)

# HTML 片段中的 <img> 和 <a> 标签，URL 位于第二个捕获组
HTML_IMAGE_PATTERN: re.Pattern = re.compile(
    r'<img([\s\S]*?)src=["\']([\s\S]*?)["\']([\s\S]*?)>', re.IGNORECASE
)
HTML_ANCHOR_PATTERN: re.Pattern = re.compile(
    r'<a([\s\S]*?)href=["\']([\s\S]*?)["\']([\s\S]*?)>', re.IGNORECASE
)

# 链接目标: [前缀 "](", URL, 剩余部分直到 ")"]
LINK_TARGET_PATTERN: re.Pattern = re.compile(r'(\]\()([^\s\)]+)(.*?\))')

# 标题提取
TITLE_MARKER_PATTERN: re.Pattern = re.compile(r'^[# \n\t*`-]*')
TITLE_LINK_PATTERN: re.Pattern = re.compile(r'!?\[([^\]]+?)\]\(.+?\)')
TITLE_EMPTY_LINK_PATTERN: re.Pattern = re.compile(r'!?\[\]\((.+?)\)')

# 表格分隔行中不允许出现的字符
TABLE_DIVIDER_INVALID_PATTERN: re.Pattern = re.compile(r'[^\s\-:|]')

# 链接校验
BAD_PROTOCOL_PATTERN: re.Pattern = re.compile(r'^(vbscript|javascript|data):')
GOOD_DATA_PATTERN: re.Pattern = re.compile(r'^data:image/(gif|png|jpeg|webp);')

# URL 协议 (http:, file:, mailto: 等)
URL_SCHEME_PATTERN: re.Pattern = re.compile(r'^[a-zA-Z][a-zA-Z0-9+.\-]*:')

# 内部资源引用 ":/<32 位 ID>"，可带 #片段
RESOURCE_URL_PATTERN: re.Pattern = re.compile(r'^:/(?P<id>[a-zA-Z0-9]{32})(?P<fragment>#\S*)?$')

# 表格单元格最小宽度
MIN_CELL_WIDTH = 5

# 标题最大长度
TITLE_MAX_LENGTH = 80
