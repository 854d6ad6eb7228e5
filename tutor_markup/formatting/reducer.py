"""
纯文本化

将原始消息转为供语音合成和分析使用的纯文本。独立于解析器：
先处理 5 种标记，再执行与解析器共用的 markdown 清理，最后去掉首尾空白。

注意：translation / vocab_word / grammar_point / essay_section / business_tip /
story_element / bold 标记不在这里处理，会以原样方括号文本保留在结果中。
"""

from __future__ import annotations

import re

from .sanitizer import clean_markdown

_ERROR_MARKER_RE = re.compile(r"\[ERROR:[^\]]*\]", re.IGNORECASE | re.ASCII)
_UNWRAP_MARKER_RES = [
    re.compile(r"\[" + name + r":([^\]]*)\]", re.IGNORECASE | re.ASCII)
    for name in ("CORRECTION", "NOTE", "TIP", "IMPORTANT")
]


def strip_formatting(content: str) -> str:
    """去掉标记和 markdown，返回纯文本

    - ERROR 标记连同内容一起删除（删除处两侧的空格原样保留）；
    - CORRECTION / NOTE / TIP / IMPORTANT 标记展开为内部文字。

    Args:
        content: 原始消息

    Returns:
        str: 纯文本
    """
    text = _ERROR_MARKER_RE.sub("", content)
    for pattern in _UNWRAP_MARKER_RES:
        text = pattern.sub(r"\1", text)
    return clean_markdown(text).strip()


__all__ = ["strip_formatting"]
