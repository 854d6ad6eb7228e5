"""
AI 导师消息格式化

- segments: 片段类型与值对象
- sanitizer: markdown 清理流水线
- segmenter: `[TYPE:payload]` 标记解析
- extraction: 原始消息的标记提取与统计
- reducer: 纯文本化（语音/分析）
- corrections: 错误→更正 纠错对
- speech: TTS 文本清理
- service: 格式化服务入口
"""

from .segments import MarkerName, Segment, SegmentList, SegmentMetadata, SegmentType
from .sanitizer import MARKDOWN_CLEANUP_STEPS, clean_markdown, sanitize
from .segmenter import parse_formatted_content, segment
from .extraction import (
    FormattedCounts,
    count_formatted_elements,
    extract_corrections,
    extract_errors,
    extract_important,
    extract_notes,
    extract_tips,
    has_formatting,
)
from .reducer import strip_formatting
from .corrections import (
    CorrectionPair,
    count_corrections,
    extract_bold_corrections,
    extract_correction_pairs,
    has_corrections,
    parse_correction_segments,
)

__all__ = [
    # 模型
    "MarkerName",
    "Segment",
    "SegmentList",
    "SegmentMetadata",
    "SegmentType",
    # 解析
    "MARKDOWN_CLEANUP_STEPS",
    "clean_markdown",
    "sanitize",
    "segment",
    "parse_formatted_content",
    # 提取
    "FormattedCounts",
    "extract_errors",
    "extract_corrections",
    "extract_notes",
    "extract_tips",
    "extract_important",
    "count_formatted_elements",
    "has_formatting",
    "strip_formatting",
    # 纠错
    "CorrectionPair",
    "parse_correction_segments",
    "extract_correction_pairs",
    "extract_bold_corrections",
    "count_corrections",
    "has_corrections",
]
