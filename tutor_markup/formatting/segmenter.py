"""
标记解析器

将清理后的文本按 `[TYPE:payload]` 标记切分为有序的片段列表。

规则：
- TYPE 为 12 种标记名之一（不区分大小写），payload 为到下一个 `]` 为止的最短内容（可跨行）；
- 标记不嵌套，`[TYPE:` 之后遇到的第一个 `]` 即结束该标记；
- 缺少 `]` 或未知 TYPE 的内容保持为普通文本；
- 本模块从不抛出异常，也不记录日志。
"""

from __future__ import annotations

import re
from typing import Callable, Dict, List, Optional, Tuple

from .sanitizer import sanitize
from .segments import (
    MARKER_ALTERNATION,
    MarkerName,
    Segment,
    SegmentList,
    SegmentMetadata,
    SegmentType,
)

MARKER_RE = re.compile(
    r"\[(" + MARKER_ALTERNATION + r"):([^\]]*)\]",
    re.IGNORECASE | re.ASCII,
)

PayloadResolver = Callable[[SegmentType, str], Optional[Segment]]


def _split_compound(payload: str) -> Optional[Tuple[str, str]]:
    """拆分 `head|tail` 形式的复合内容；没有分隔符时返回 None。

    tail 中的其余 `|` 原样保留。
    """
    parts = payload.split("|")
    if len(parts) < 2:
        return None
    return parts[0].strip(), "|".join(parts[1:]).strip()


def resolve_simple(segment_type: SegmentType, payload: str) -> Optional[Segment]:
    return Segment(type=segment_type, content=payload)


def resolve_translation(segment_type: SegmentType, payload: str) -> Optional[Segment]:
    split = _split_compound(payload)
    if split is None:
        return None
    language, content = split
    return Segment(type=segment_type, content=content, metadata=SegmentMetadata(language=language))


def resolve_vocab_word(segment_type: SegmentType, payload: str) -> Optional[Segment]:
    split = _split_compound(payload)
    if split is None:
        return None
    word, content = split
    return Segment(type=segment_type, content=content, metadata=SegmentMetadata(word=word))


def resolve_categorized(segment_type: SegmentType, payload: str) -> Optional[Segment]:
    """分类标记：没有分隔符时退化为整段内容，而不是丢弃"""
    split = _split_compound(payload)
    if split is None:
        return Segment(type=segment_type, content=payload)
    category, content = split
    return Segment(type=segment_type, content=content, metadata=SegmentMetadata(category=category))


PAYLOAD_RESOLVERS: Dict[MarkerName, PayloadResolver] = {
    MarkerName.ERROR: resolve_simple,
    MarkerName.CORRECTION: resolve_simple,
    MarkerName.NOTE: resolve_simple,
    MarkerName.TIP: resolve_simple,
    MarkerName.IMPORTANT: resolve_simple,
    MarkerName.BOLD: resolve_simple,
    MarkerName.TRANSLATION: resolve_translation,
    MarkerName.VOCAB_WORD: resolve_vocab_word,
    MarkerName.GRAMMAR_POINT: resolve_simple,
    MarkerName.ESSAY_SECTION: resolve_categorized,
    MarkerName.BUSINESS_TIP: resolve_simple,
    MarkerName.STORY_ELEMENT: resolve_categorized,
}

_missing = [name.value for name in MarkerName if name not in PAYLOAD_RESOLVERS]
if _missing:
    raise RuntimeError(f"标记缺少内容解析器: {', '.join(_missing)}")


def _keep_text(text: str) -> bool:
    # 非空白内容保留；纯空白但含换行的间隔也保留，用于维持段落间距
    return bool(text.strip()) or "\n" in text


def resolve_marker(name: str, payload: str) -> Optional[Segment]:
    """解析单个标记。内容为空或复合内容不完整时返回 None（标记被丢弃）。"""
    payload = payload.strip()
    if not payload:
        return None
    marker = MarkerName.from_wire(name)
    return PAYLOAD_RESOLVERS[marker](marker.segment_type, payload)


def segment(cleaned: str) -> SegmentList:
    """将清理后的文本切分为片段

    Args:
        cleaned: 已经过 `sanitize` 的文本

    Returns:
        SegmentList: 有序片段元组，至少包含一个元素
    """
    segments: List[Segment] = []
    cursor = 0

    for match in MARKER_RE.finditer(cleaned):
        if match.start() > cursor:
            before = cleaned[cursor:match.start()]
            if _keep_text(before):
                segments.append(Segment(type=SegmentType.TEXT, content=before))

        resolved = resolve_marker(match.group(1), match.group(2))
        if resolved is not None:
            segments.append(resolved)

        cursor = match.end()

    if cursor < len(cleaned):
        after = cleaned[cursor:]
        if _keep_text(after):
            segments.append(Segment(type=SegmentType.TEXT, content=after))

    if not segments:
        segments.append(Segment(type=SegmentType.TEXT, content=cleaned))

    return tuple(segments)


def parse_formatted_content(content: str) -> SegmentList:
    """清理 markdown 并解析标记：`segment(sanitize(content))`"""
    return segment(sanitize(content))


__all__ = [
    "MARKER_RE",
    "PAYLOAD_RESOLVERS",
    "resolve_marker",
    "segment",
    "parse_formatted_content",
]
