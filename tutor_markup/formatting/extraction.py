"""
标记提取与统计

直接扫描原始消息（不经过 markdown 清理和片段解析），供分析类调用方使用。
返回的内容是标记里的原始文本（不去空白、不清理 markdown），
因此可能与解析器得到的片段内容不同，这是预期行为。
"""

from __future__ import annotations

import re
from dataclasses import dataclass, asdict
from typing import Dict, List, Pattern

from .segments import MARKER_ALTERNATION, MarkerName


def _payload_pattern(marker: MarkerName) -> Pattern[str]:
    # 区分大小写，只匹配大写标记名
    return re.compile(r"\[" + marker.value + r":([^\]]*)\]")


def _opening_pattern(marker: MarkerName) -> Pattern[str]:
    return re.compile(r"\[" + marker.value + ":")


_ERROR_RE = _payload_pattern(MarkerName.ERROR)
_CORRECTION_RE = _payload_pattern(MarkerName.CORRECTION)
_NOTE_RE = _payload_pattern(MarkerName.NOTE)
_TIP_RE = _payload_pattern(MarkerName.TIP)
_IMPORTANT_RE = _payload_pattern(MarkerName.IMPORTANT)

_ANY_MARKER_RE = re.compile(r"\[(?:" + MARKER_ALTERNATION + "):", re.IGNORECASE | re.ASCII)


@dataclass(frozen=True)
class FormattedCounts:
    """各类标记的出现次数"""

    errors: int = 0
    corrections: int = 0
    notes: int = 0
    tips: int = 0
    important: int = 0

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


def extract_errors(content: str) -> List[str]:
    """按出现顺序返回所有 `[ERROR:...]` 的原始内容"""
    return [m.group(1) for m in _ERROR_RE.finditer(content)]


def extract_corrections(content: str) -> List[str]:
    return [m.group(1) for m in _CORRECTION_RE.finditer(content)]


def extract_notes(content: str) -> List[str]:
    return [m.group(1) for m in _NOTE_RE.finditer(content)]


def extract_tips(content: str) -> List[str]:
    return [m.group(1) for m in _TIP_RE.finditer(content)]


def extract_important(content: str) -> List[str]:
    return [m.group(1) for m in _IMPORTANT_RE.finditer(content)]


_OPENING_PATTERNS: Dict[str, Pattern[str]] = {
    "errors": _opening_pattern(MarkerName.ERROR),
    "corrections": _opening_pattern(MarkerName.CORRECTION),
    "notes": _opening_pattern(MarkerName.NOTE),
    "tips": _opening_pattern(MarkerName.TIP),
    "important": _opening_pattern(MarkerName.IMPORTANT),
}


def count_formatted_elements(content: str) -> FormattedCounts:
    """统计 5 类标记的出现次数

    只按开头 `[NAME:` 计数，不要求标记闭合，与解析器结果无关。
    """
    return FormattedCounts(
        **{field: len(pattern.findall(content)) for field, pattern in _OPENING_PATTERNS.items()}
    )


def has_formatting(content: str) -> bool:
    """消息中是否出现任意一种标记开头（不区分大小写）"""
    return _ANY_MARKER_RE.search(content) is not None


__all__ = [
    "FormattedCounts",
    "extract_errors",
    "extract_corrections",
    "extract_notes",
    "extract_tips",
    "extract_important",
    "count_formatted_elements",
    "has_formatting",
]
