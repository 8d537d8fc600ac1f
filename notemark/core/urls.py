"""
URL 提取模块 - 从 Markdown（包括内嵌 HTML）中提取文件、图片和链接 URL

使用 markdown-it-py 将 Markdown 解析为 token 树，递归遍历 token：
- image / link_open token：读取 src / href 属性
- html_block / html_inline token：用正则重新扫描 <img> 和 <a> 标签

返回的 URL 保持源文档中的编码形式，使用前需要自行解码。
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional
from urllib.parse import urlsplit

from markdown_it import MarkdownIt
from markdown_it.token import Token

from notemark.core.patterns import (
    HTML_IMAGE_PATTERN,
    HTML_ANCHOR_PATTERN,
    LINK_TARGET_PATTERN,
    BAD_PROTOCOL_PATTERN,
    GOOD_DATA_PATTERN,
    URL_SCHEME_PATTERN,
)

logger = logging.getLogger(__name__)

LinkValidator = Callable[[str], bool]
UrlPrepender = Callable[[str, str], str]


class UrlKind(Enum):
    """URL 来源类型"""
    ANCHOR = 1
    IMAGE = 2


@dataclass(frozen=True)
class ExtractedUrl:
    """
    提取到的 URL

    Attributes:
        url: 编码形式的 URL
        kind: 来源类型（链接或图片）
    """
    url: str
    kind: UrlKind


@dataclass(frozen=True)
class ExtractOptions:
    """
    URL 提取选项

    Attributes:
        include_images: 是否包含图片
        include_anchors: 是否包含链接
        detailed_results: 返回 ExtractedUrl 列表而不是 URL 字符串列表
        html: 是否让解析器把 Markdown 中的 HTML 解析为 HTML token
    """
    include_images: bool = True
    include_anchors: bool = True
    detailed_results: bool = False
    # 默认关闭以兼容旧行为
    html: bool = False


def validate_links(url: str) -> bool:
    """
    链接校验

    拒绝 vbscript:、javascript: 和 data: 协议（允许常见图片格式的 data URL），
    其余协议（包括 file:// 和内部资源引用 :/）全部放行。

    Args:
        url: 待校验的 URL

    Returns:
        是否允许该链接
    """
    value = url.strip().lower()
    if value.startswith('data:image/svg+xml,'):
        return True
    if BAD_PROTOCOL_PATTERN.match(value):
        return GOOD_DATA_PATTERN.match(value) is not None
    return True


def _create_parser(html: bool, validate_link: LinkValidator) -> MarkdownIt:
    md = MarkdownIt("js-default", {"html": html})
    # 默认校验会拒绝 file:/// 等链接
    md.validateLink = validate_link
    return md


def _collect_attr_urls(token: Token, kind: UrlKind) -> list[ExtractedUrl]:
    results: list[ExtractedUrl] = []
    for name, value in token.attrs.items():
        if name in ('src', 'href') and value:
            results.append(ExtractedUrl(url=str(value), kind=kind))
    return results


def _collect_html_urls(content: str, options: ExtractOptions) -> list[ExtractedUrl]:
    results: list[ExtractedUrl] = []
    for pattern, kind in ((HTML_IMAGE_PATTERN, UrlKind.IMAGE), (HTML_ANCHOR_PATTERN, UrlKind.ANCHOR)):
        if kind == UrlKind.IMAGE and not options.include_images:
            continue
        if kind == UrlKind.ANCHOR and not options.include_anchors:
            continue

        for match in pattern.finditer(content):
            results.append(ExtractedUrl(url=match.group(2), kind=kind))
    return results


def _search_urls(tokens: list[Token], options: ExtractOptions, output: list[ExtractedUrl]) -> None:
    for token in tokens:
        if token.type in ('image', 'link_open'):
            kind = UrlKind.IMAGE if token.type == 'image' else UrlKind.ANCHOR
            if (kind == UrlKind.IMAGE and not options.include_images) or (
                kind == UrlKind.ANCHOR and not options.include_anchors
            ):
                logger.debug(f"Skipping {token.type} token excluded by options")
                continue
            output.extend(_collect_attr_urls(token, kind))

        elif token.type in ('html_block', 'html_inline'):
            output.extend(_collect_html_urls(token.content or '', options))

        if token.children:
            _search_urls(token.children, options, output)


def extract_file_urls(
    md: str,
    options: Optional[ExtractOptions] = None,
    *,
    validate_link: Optional[LinkValidator] = None,
    **overrides: bool,
) -> list[str] | list[ExtractedUrl]:
    """
    提取 Markdown 中的文件 URL

    Args:
        md: Markdown 内容
        options: 提取选项，默认为 ExtractOptions()
        validate_link: 链接校验函数，默认为 validate_links
        **overrides: 覆盖 options 中的单个字段，如 include_anchors=False

    Returns:
        detailed_results 为 False 时返回 URL 字符串列表，否则返回 ExtractedUrl 列表。
        顺序与文档顺序一致，保留重复项。
    """
    options = options or ExtractOptions()
    if overrides:
        options = replace(options, **overrides)

    if not md:
        return []

    parser = _create_parser(options.html, validate_link or validate_links)
    tokens = parser.parse(md, {})

    output: list[ExtractedUrl] = []
    _search_urls(tokens, options, output)

    logger.debug(f"Extracted {len(output)} URLs from {len(tokens)} block tokens")

    if options.detailed_results:
        return output
    return [result.url for result in output]


def extract_image_urls(md: str) -> list[str]:
    """提取 Markdown 中所有图片的 URL"""
    return extract_file_urls(md, include_images=True, include_anchors=False)


def prepend_url(url: str, base_url: str) -> str:
    """
    为相对 URL 添加基础 URL

    规则：
    1. 基础 URL 为空、锚点链接 (#...)、已有协议的 URL：原样返回
    2. 协议相对 URL (//host/path)：使用基础 URL 的协议
    3. 根路径 URL (/path)：使用基础 URL 的协议和主机
    4. 其他：基础 URL + "/" + url

    Args:
        url: 链接 URL
        base_url: 基础 URL

    Returns:
        处理后的 URL
    """
    base_url = base_url.rstrip('/').strip() if base_url else ''
    url = url.strip() if url else ''

    if not base_url:
        return url
    if url.startswith('#'):
        return url
    if URL_SCHEME_PATTERN.match(url):
        return url

    parts = urlsplit(base_url)
    if url.startswith('//'):
        return f"{parts.scheme}:{url}" if parts.scheme else url
    if url.startswith('/'):
        return f"{parts.scheme}://{parts.netloc}{url}" if parts.netloc else f"{base_url}{url}"
    return f"{base_url}/{url}"


def prepend_base_url(md: str, base_url: str, *, prepend: Optional[UrlPrepender] = None) -> str:
    """
    为 Markdown 中所有链接目标添加基础 URL

    匹配 "](url ...)"，URL 为 "](" 之后直到第一个空白或 ")" 的部分。

    Args:
        md: Markdown 内容
        base_url: 基础 URL
        prepend: URL 处理函数，默认为 prepend_url

    Returns:
        处理后的 Markdown
    """
    if not md:
        return ''

    prepend = prepend or prepend_url

    def _replace(match) -> str:
        before, url, after = match.group(1), match.group(2), match.group(3)
        return before + prepend(url, base_url) + after

    return LINK_TARGET_PATTERN.sub(_replace, md)
