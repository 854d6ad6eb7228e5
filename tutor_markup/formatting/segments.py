"""
片段数据模型

定义 AI 导师消息解析后的片段类型、标记名以及片段值对象。

说明：
- `SegmentType` 是封闭的片段类型集合（16 种），展示层需要穷举处理；
- `MarkerName` 是消息中可出现的 12 种标记名（线上格式为大写），
  通过 `segment_type` 全量映射到 `SegmentType`；
- heading / bullet / numbered 以及 original_text / level 为保留字段，当前语法不会产生。
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class SegmentType(str, Enum):
    """片段类型（字符串枚举，值即序列化后的 type 字段）"""

    TEXT = "text"
    ERROR = "error"
    CORRECTION = "correction"
    NOTE = "note"
    IMPORTANT = "important"
    TIP = "tip"
    HEADING = "heading"  # 保留
    BULLET = "bullet"  # 保留
    NUMBERED = "numbered"  # 保留
    BOLD = "bold"
    TRANSLATION = "translation"
    VOCAB_WORD = "vocab_word"
    GRAMMAR_POINT = "grammar_point"
    ESSAY_SECTION = "essay_section"
    BUSINESS_TIP = "business_tip"
    STORY_ELEMENT = "story_element"


class MarkerName(str, Enum):
    """消息中的标记名，值为线上格式（大写）"""

    ERROR = "ERROR"
    CORRECTION = "CORRECTION"
    NOTE = "NOTE"
    TIP = "TIP"
    IMPORTANT = "IMPORTANT"
    BOLD = "BOLD"
    TRANSLATION = "TRANSLATION"
    VOCAB_WORD = "VOCAB_WORD"
    GRAMMAR_POINT = "GRAMMAR_POINT"
    ESSAY_SECTION = "ESSAY_SECTION"
    BUSINESS_TIP = "BUSINESS_TIP"
    STORY_ELEMENT = "STORY_ELEMENT"

    @property
    def segment_type(self) -> SegmentType:
        """标记名对应的片段类型"""
        return _MARKER_SEGMENT_TYPES[self]

    @classmethod
    def from_wire(cls, name: str) -> "MarkerName":
        """将消息中捕获的标记名（任意大小写）转换为枚举值"""
        return cls(name.upper())


_MARKER_SEGMENT_TYPES: Dict[MarkerName, SegmentType] = {
    MarkerName.ERROR: SegmentType.ERROR,
    MarkerName.CORRECTION: SegmentType.CORRECTION,
    MarkerName.NOTE: SegmentType.NOTE,
    MarkerName.TIP: SegmentType.TIP,
    MarkerName.IMPORTANT: SegmentType.IMPORTANT,
    MarkerName.BOLD: SegmentType.BOLD,
    MarkerName.TRANSLATION: SegmentType.TRANSLATION,
    MarkerName.VOCAB_WORD: SegmentType.VOCAB_WORD,
    MarkerName.GRAMMAR_POINT: SegmentType.GRAMMAR_POINT,
    MarkerName.ESSAY_SECTION: SegmentType.ESSAY_SECTION,
    MarkerName.BUSINESS_TIP: SegmentType.BUSINESS_TIP,
    MarkerName.STORY_ELEMENT: SegmentType.STORY_ELEMENT,
}

# 所有标记名的正则备选项，按声明顺序拼接
MARKER_ALTERNATION = "|".join(name.value for name in MarkerName)


@dataclass(frozen=True)
class SegmentMetadata:
    """复合标记拆分出的元信息

    Attributes:
        word: 词汇卡片的单词（vocab_word）
        translation: 保留字段，当前未使用
        language: 译文语言（translation）
        category: 分类（essay_section / story_element）
    """

    word: Optional[str] = None
    translation: Optional[str] = None
    language: Optional[str] = None
    category: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        return {k: v for k, v in asdict(self).items() if v is not None}


@dataclass(frozen=True)
class Segment:
    """解析得到的单个片段（不可变值对象）"""

    type: SegmentType
    content: str
    metadata: Optional[SegmentMetadata] = None
    original_text: Optional[str] = None  # 保留
    level: Optional[int] = None  # 保留

    def to_dict(self) -> Dict[str, Any]:
        """序列化为展示层使用的字典，省略空的可选字段"""
        data: Dict[str, Any] = {"type": self.type.value, "content": self.content}
        if self.metadata is not None:
            data["metadata"] = self.metadata.to_dict()
        if self.original_text is not None:
            data["originalText"] = self.original_text
        if self.level is not None:
            data["level"] = self.level
        return data


SegmentList = Tuple[Segment, ...]


__all__ = [
    "SegmentType",
    "MarkerName",
    "MARKER_ALTERNATION",
    "SegmentMetadata",
    "Segment",
    "SegmentList",
]
