"""
Markdown 清理流水线

AI 导师被要求不输出 markdown，但模型偶尔仍会带出 `**`、`#` 等语法。
本模块在解析标记之前去掉这些语法，只保留文字内容。

清理由一组有序的纯函数步骤组成，顺序有意义：后面的步骤作用在前面步骤的结果上。
解析器（sanitize）与纯文本化（strip_formatting）共用同一条流水线。
"""

from __future__ import annotations

import re
from typing import Callable, List, Tuple

CleanupStep = Callable[[str], str]

_HEADER_RE = re.compile(r"^#{1,6}\s+(.+)$", re.MULTILINE)
_BOLD_STAR_RE = re.compile(r"\*\*(.+?)\*\*")
_BOLD_UNDERSCORE_RE = re.compile(r"__(.+?)__")
# 单个 * / _ 包裹的斜体；前后不能紧挨同一符号，避免吃掉粗体的双符号
_ITALIC_STAR_RE = re.compile(r"(?<!\*)\*(?!\*)(.+?)(?<!\*)\*(?!\*)")
_ITALIC_UNDERSCORE_RE = re.compile(r"(?<!_)_(?!_)(.+?)(?<!_)_(?!_)")
_BULLET_RE = re.compile(r"^[*\-+•]\s+", re.MULTILINE)
_NUMBERED_RE = re.compile(r"^[0-9]+\.\s+", re.MULTILINE)
_BLOCKQUOTE_RE = re.compile(r"^>\s+", re.MULTILINE)
_HORIZONTAL_RULE_RE = re.compile(r"^[-*_]{3,}$", re.MULTILINE)
_CODE_FENCE_RE = re.compile(r"```[\s\S]*?```")
_INLINE_CODE_RE = re.compile(r"`(.+?)`")
_STRIKETHROUGH_RE = re.compile(r"~~(.+?)~~")
_EXTRA_NEWLINES_RE = re.compile(r"\n{3,}")


def strip_headers(text: str) -> str:
    """去掉行首的 `#` 标题符号，保留标题文字"""
    return _HEADER_RE.sub(r"\1", text)


def unwrap_bold(text: str) -> str:
    text = _BOLD_STAR_RE.sub(r"\1", text)
    return _BOLD_UNDERSCORE_RE.sub(r"\1", text)


def unwrap_italic(text: str) -> str:
    text = _ITALIC_STAR_RE.sub(r"\1", text)
    return _ITALIC_UNDERSCORE_RE.sub(r"\1", text)


def strip_bullets(text: str) -> str:
    return _BULLET_RE.sub("", text)


def strip_numbered(text: str) -> str:
    return _NUMBERED_RE.sub("", text)


def strip_blockquotes(text: str) -> str:
    return _BLOCKQUOTE_RE.sub("", text)


def strip_horizontal_rules(text: str) -> str:
    """分隔线整行清空，换行符保留"""
    return _HORIZONTAL_RULE_RE.sub("", text)


def remove_code_blocks(text: str) -> str:
    """删除围栏代码块（内容一并丢弃）"""
    return _CODE_FENCE_RE.sub("", text)


def unwrap_inline_code(text: str) -> str:
    return _INLINE_CODE_RE.sub(r"\1", text)


def unwrap_strikethrough(text: str) -> str:
    return _STRIKETHROUGH_RE.sub(r"\1", text)


def collapse_newlines(text: str) -> str:
    """3 个及以上连续换行折叠为 2 个"""
    return _EXTRA_NEWLINES_RE.sub("\n\n", text)


MARKDOWN_CLEANUP_STEPS: List[Tuple[str, CleanupStep]] = [
    ("headers", strip_headers),
    ("bold", unwrap_bold),
    ("italic", unwrap_italic),
    ("bullets", strip_bullets),
    ("numbered", strip_numbered),
    ("blockquotes", strip_blockquotes),
    ("horizontal_rules", strip_horizontal_rules),
    ("code_blocks", remove_code_blocks),
    ("inline_code", unwrap_inline_code),
    ("strikethrough", unwrap_strikethrough),
    ("newlines", collapse_newlines),
]


def clean_markdown(text: str) -> str:
    """按顺序执行全部 markdown 清理步骤

    Args:
        text: 原始文本

    Returns:
        str: 清理后的文本；不匹配任何规则的内容原样保留
    """
    for _name, step in MARKDOWN_CLEANUP_STEPS:
        text = step(text)
    return text


def sanitize(content: str) -> str:
    """解析标记前的预处理：去掉常规 markdown 语法"""
    return clean_markdown(content)


__all__ = [
    "MARKDOWN_CLEANUP_STEPS",
    "clean_markdown",
    "sanitize",
    "strip_headers",
    "unwrap_bold",
    "unwrap_italic",
    "strip_bullets",
    "strip_numbered",
    "strip_blockquotes",
    "strip_horizontal_rules",
    "remove_code_blocks",
    "unwrap_inline_code",
    "unwrap_strikethrough",
    "collapse_newlines",
]
