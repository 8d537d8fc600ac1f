"""
notemark - 笔记应用的 Markdown 文本处理工具集
"""

__version__ = "0.1.0"
