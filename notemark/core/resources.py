"""
资源 URL 改写 - 把 Markdown 链接中的外部 URL 替换为内部资源引用 ":/<id>"
"""

import re

from notemark.core.patterns import RESOURCE_URL_PATTERN


def resource_url(resource_id: str) -> str:
    """构建内部资源引用"""
    return f":/{resource_id}"


def is_resource_url(url: str) -> bool:
    """判断 URL 是否为内部资源引用（":/" + 32 位 ID，可带 #片段）"""
    if not url:
        return False
    return RESOURCE_URL_PATTERN.match(url) is not None


def resource_id_from_url(url: str) -> str:
    """从内部资源引用中取出资源 ID，不是资源引用时返回空字符串"""
    if not url:
        return ''
    match = RESOURCE_URL_PATTERN.match(url)
    return match.group('id') if match else ''


def replace_resource_url(md: str, url_to_replace: str, resource_id: str) -> str:
    """
    替换链接中的 URL

    只替换位于 "](" 之后、同一行后面还有 ")" 的 URL，URL 可以用 <> 包裹，
    包裹的尖括号会一起被替换。文档中所有匹配都会被替换。

    Args:
        md: Markdown 内容
        url_to_replace: 要替换的 URL（按字面匹配）
        resource_id: 资源 ID

    Returns:
        替换后的 Markdown
    """
    if not md or not url_to_replace:
        return md or ''

    pattern = re.compile(rf'(?<=\]\()<?{re.escape(url_to_replace)}>?(?=.*\))')
    replacement = resource_url(resource_id)
    return pattern.sub(lambda _match: replacement, md)
