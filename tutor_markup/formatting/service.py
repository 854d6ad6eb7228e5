"""
消息格式化服务

面向调用方的统一入口：一次完成片段解析、纯文本化与标记统计，
并支持批量格式化。解析函数本身是纯函数，批量时可以安全地并发执行。
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Sequence

from tutor_markup.config import get_config_manager
from tutor_markup.core.exceptions import InvalidContentError
from .extraction import FormattedCounts, count_formatted_elements, has_formatting
from .reducer import strip_formatting
from .segmenter import parse_formatted_content
from .segments import Segment, SegmentList

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormattedMessage:
    """单条消息的格式化结果"""

    segments: SegmentList
    plain_text: str
    counts: FormattedCounts
    has_formatting: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "segments": [s.to_dict() for s in self.segments],
            "plain_text": self.plain_text,
            "counts": self.counts.to_dict(),
            "has_formatting": self.has_formatting,
        }


class MessageFormatter:
    """AI 消息格式化器

    从配置的 formatting 段读取批量并发数与分批大小。
    """

    def __init__(self, config_manager=None) -> None:
        """
        初始化格式化器

        Args:
            config_manager: 配置管理器实例，为 None 时使用全局实例

        Returns:
            None
        """
        config_manager = config_manager or get_config_manager()
        formatting_config = config_manager.get_formatting_config()
        self.max_workers = max(1, int(formatting_config.get("batch_max_workers", 4)))
        self.segment_batch_size = max(1, int(formatting_config.get("segment_batch_size", 6)))

    def format(self, content: str) -> FormattedMessage:
        """
        格式化单条消息

        Args:
            content: 原始消息

        Returns:
            FormattedMessage: 片段、纯文本、计数与是否含标记

        Raises:
            InvalidContentError: content 不是字符串
        """
        if not isinstance(content, str):
            raise InvalidContentError(f"invalid_content: 期望 str，实际为 {type(content).__name__}")

        return FormattedMessage(
            segments=parse_formatted_content(content),
            plain_text=strip_formatting(content),
            counts=count_formatted_elements(content),
            has_formatting=has_formatting(content),
        )

    def format_batch(self, contents: Sequence[str]) -> List[FormattedMessage]:
        """
        批量格式化，结果顺序与输入一致

        用处：加载历史会话时一次性处理多条消息。

        Args:
            contents: 原始消息列表

        Returns:
            List[FormattedMessage]: 格式化结果列表
        """
        if not contents:
            return []

        for index, content in enumerate(contents):
            if not isinstance(content, str):
                raise InvalidContentError(f"invalid_content: 第 {index} 条消息不是字符串")

        workers = min(self.max_workers, len(contents))
        if workers == 1:
            results = [self.format(content) for content in contents]
        else:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                results = list(executor.map(self.format, contents))

        logger.debug(f"批量格式化完成：{len(contents)} 条消息，并发数 {workers}")
        return results

    def iter_segment_batches(
        self, segments: Sequence[Segment], batch_size: Optional[int] = None
    ) -> Iterator[List[Segment]]:
        """
        将已解析的片段按固定大小分批，便于分段下发给展示层

        Raises:
            ValueError: 显式传入的 batch_size 小于 1
        """
        if batch_size is not None and batch_size < 1:
            raise ValueError(f"batch_size 必须大于等于 1，实际为 {batch_size}")
        size = batch_size if batch_size is not None else self.segment_batch_size
        for start in range(0, len(segments), size):
            yield list(segments[start : start + size])


__all__ = ["FormattedMessage", "MessageFormatter"]
