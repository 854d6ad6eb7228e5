"""
消息格式化接口的请求/响应模型
"""

from __future__ import annotations

from typing import Dict, List, Optional
from pydantic import BaseModel, Field


class FormatRequest(BaseModel):
    """单条消息请求"""

    content: str = Field(..., description="AI 导师生成的原始消息")


class SpeechRequest(BaseModel):
    content: str = Field(..., description="待朗读的原始消息")
    language: Optional[str] = Field(None, description="朗读语言，默认使用配置值")


class BatchFormatRequest(BaseModel):
    contents: List[str] = Field(default_factory=list, description="多条原始消息")


class SegmentMetadataModel(BaseModel):
    word: Optional[str] = None
    translation: Optional[str] = None
    language: Optional[str] = None
    category: Optional[str] = None


class SegmentModel(BaseModel):
    """展示层使用的片段结构"""

    type: str = Field(..., description="片段类型")
    content: str = Field(..., description="片段内容")
    metadata: Optional[SegmentMetadataModel] = Field(None, description="复合标记的元信息")
    original_text: Optional[str] = Field(None, alias="originalText", description="保留字段")
    level: Optional[int] = Field(None, description="保留字段")


class CountsModel(BaseModel):
    errors: int = 0
    corrections: int = 0
    notes: int = 0
    tips: int = 0
    important: int = 0


class FormattedMessageModel(BaseModel):
    """单条消息的完整格式化结果"""

    segments: List[SegmentModel] = Field(default_factory=list)
    plain_text: str = ""
    counts: CountsModel = Field(default_factory=CountsModel)
    has_formatting: bool = False


class ExtractionModel(BaseModel):
    """原始消息中各类标记的内容与计数"""

    errors: List[str] = Field(default_factory=list)
    corrections: List[str] = Field(default_factory=list)
    notes: List[str] = Field(default_factory=list)
    tips: List[str] = Field(default_factory=list)
    important: List[str] = Field(default_factory=list)
    counts: CountsModel = Field(default_factory=CountsModel)


class SpeechModel(BaseModel):
    valid: bool
    cleaned: str
    error: Optional[str] = None
    voice_codes: List[str] = Field(default_factory=list)


class HealthData(BaseModel):
    status: str
    message: str
    markers: List[str]
    config_sections: Dict[str, bool]
