"""
转义工具 - 链接标题、链接 URL、表格单元格和行内代码的字符级转换
"""


def escape_title_text(text: str) -> str:
    """
    转义链接标题

    链接标题只需要转义 [ 和 ]。

    Args:
        text: 链接标题

    Returns:
        转义后的标题
    """
    return text.replace('[', '\\[').replace(']', '\\]')


def escape_link_url(url: str) -> str:
    """
    转义链接 URL

    依次将 (、) 和空格替换为 %28、%29、%20。

    Args:
        url: 原始 URL

    Returns:
        可直接放入 [text](url) 的 URL
    """
    url = url.replace('(', '%28')
    url = url.replace(')', '%29')
    url = url.replace(' ', '%20')
    return url


def unescape_link_url(url: str) -> str:
    """escape_link_url 的逆操作"""
    url = url.replace('%28', '(')
    url = url.replace('%29', ')')
    url = url.replace('%20', ' ')
    return url


def escape_table_cell(text: str) -> str:
    """
    转义表格单元格内容

    处理顺序：
    1. 禁用 HTML：< 和 > 转为实体
    2. 单元格不能换行，换行转为 <br/>
    3. | 是保留字符，转为 \\|

    注意：该函数不是幂等的，重复调用会把 \\| 变成 \\\\|。

    Args:
        text: 单元格原始内容

    Returns:
        转义后的单元格内容
    """
    text = text.replace('<', '&lt;')
    text = text.replace('>', '&gt;')
    text = text.replace('\n', '<br/>')
    text = text.replace('|', '\\|')
    return text


def escape_inline_code(text: str) -> str:
    """转义行内代码中的反引号（每个反引号写两次）"""
    # https://github.com/github/markup/issues/363#issuecomment-55499909
    return text.replace('`', '``')
