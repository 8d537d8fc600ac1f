"""
Core Layer - 核心层

包含转义工具、列表行识别、URL 提取、资源 URL 改写、表格和标题提取。
所有函数都是无副作用的纯函数。
"""

from notemark.core.escaping import (
    escape_title_text,
    escape_link_url,
    unescape_link_url,
    escape_table_cell,
    escape_inline_code,
)
from notemark.core.lists import (
    match_list_item,
    is_list_item,
    is_empty_list_item,
    extract_list_token,
    ol_line_number,
    ListMatch,
)
from notemark.core.urls import (
    extract_file_urls,
    extract_image_urls,
    validate_links,
    prepend_url,
    prepend_base_url,
    ExtractOptions,
    ExtractedUrl,
    UrlKind,
)
from notemark.core.resources import (
    replace_resource_url,
    resource_url,
    is_resource_url,
    resource_id_from_url,
)
from notemark.core.tables import (
    create_markdown_table,
    count_table_columns,
    matching_table_divider,
    find_tables,
    TableHeader,
    TableJustify,
    TableLocation,
    TableRow,
)
from notemark.core.title import title_from_body

__all__ = [
    # escaping
    "escape_title_text",
    "escape_link_url",
    "unescape_link_url",
    "escape_table_cell",
    "escape_inline_code",
    # lists
    "match_list_item",
    "is_list_item",
    "is_empty_list_item",
    "extract_list_token",
    "ol_line_number",
    "ListMatch",
    # urls
    "extract_file_urls",
    "extract_image_urls",
    "validate_links",
    "prepend_url",
    "prepend_base_url",
    "ExtractOptions",
    "ExtractedUrl",
    "UrlKind",
    # resources
    "replace_resource_url",
    "resource_url",
    "is_resource_url",
    "resource_id_from_url",
    # tables
    "create_markdown_table",
    "count_table_columns",
    "matching_table_divider",
    "find_tables",
    "TableHeader",
    "TableJustify",
    "TableLocation",
    "TableRow",
    # title
    "title_from_body",
]
