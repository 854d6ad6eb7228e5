"""
纠错对提取

聊天界面中的纠错高亮只关心 ERROR / CORRECTION 两种标记：
错误后紧跟的更正组成一个纠错对，供学习总结和统计使用。
模型有时用 `**更正**` 代替标记，这类粗体更正没有对应的错误原文。
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

from .segments import MarkerName, Segment, SegmentList, SegmentType

_CORRECTION_MARKER_RE = re.compile(r"\[(ERROR|CORRECTION):([^\]]*)\]")
_BOLD_CORRECTION_RE = re.compile(r"\*\*(.*?)\*\*")
_CORRECTION_OPENING_RE = re.compile(r"\[(?:ERROR|CORRECTION):")


@dataclass(frozen=True)
class CorrectionPair:
    """一条纠错：错误原文与更正文本（粗体更正的 error 为空字符串）"""

    error: str
    correction: str


def parse_correction_segments(message: str) -> SegmentList:
    """只识别 ERROR / CORRECTION 标记的轻量解析

    与完整解析器不同：不清理 markdown，标记内容不去空白，
    纯空白的间隔一律丢弃（包括只有换行的间隔）。
    """
    segments: List[Segment] = []
    cursor = 0

    for match in _CORRECTION_MARKER_RE.finditer(message):
        if cursor < match.start():
            before = message[cursor:match.start()]
            if before.strip():
                segments.append(Segment(type=SegmentType.TEXT, content=before))
        marker = MarkerName(match.group(1))
        segments.append(Segment(type=marker.segment_type, content=match.group(2)))
        cursor = match.end()

    if cursor < len(message):
        remaining = message[cursor:]
        if remaining.strip():
            segments.append(Segment(type=SegmentType.TEXT, content=remaining))

    if not segments:
        segments.append(Segment(type=SegmentType.TEXT, content=message))

    return tuple(segments)


def extract_correction_pairs(message: str) -> List[CorrectionPair]:
    """提取相邻的 错误→更正 对"""
    segments = parse_correction_segments(message)
    pairs: List[CorrectionPair] = []
    for current, following in zip(segments, segments[1:]):
        if current.type is SegmentType.ERROR and following.type is SegmentType.CORRECTION:
            pairs.append(CorrectionPair(error=current.content, correction=following.content))
    return pairs


def extract_bold_corrections(message: str) -> List[CorrectionPair]:
    """提取 `**...**` 形式的更正"""
    return [CorrectionPair(error="", correction=m.group(1)) for m in _BOLD_CORRECTION_RE.finditer(message)]


def count_corrections(message: str) -> int:
    """纠错总数：标记纠错对 + 粗体更正"""
    return len(extract_correction_pairs(message)) + len(extract_bold_corrections(message))


def has_corrections(message: str) -> bool:
    return bool(_CORRECTION_OPENING_RE.search(message) or _BOLD_CORRECTION_RE.search(message))


__all__ = [
    "CorrectionPair",
    "parse_correction_segments",
    "extract_correction_pairs",
    "extract_bold_corrections",
    "count_corrections",
    "has_corrections",
]
