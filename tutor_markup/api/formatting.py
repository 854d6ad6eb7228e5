from __future__ import annotations

from datetime import datetime
from typing import Any

from fastapi import APIRouter

from tutor_markup.formatting import (
    count_formatted_elements,
    extract_corrections,
    extract_errors,
    extract_important,
    extract_notes,
    extract_tips,
    parse_formatted_content,
    has_formatting,
    strip_formatting,
)
from tutor_markup.formatting.service import MessageFormatter
from tutor_markup.formatting.speech import SpeechTextCleaner
from .schemas import (
    BaseResponse,
    BatchFormatRequest,
    ExtractionModel,
    FormatRequest,
    FormattedMessageModel,
    ResponseCode,
    ResponseMessage,
    SpeechModel,
    SpeechRequest,
)


router = APIRouter()


def _ok(data: Any) -> BaseResponse:
    return BaseResponse(
        code=ResponseCode.OK,
        message=ResponseMessage.SUCCESS,
        data=data,
        request_id="",
        timestamp=datetime.utcnow().isoformat() + "Z",
    )


@router.post("/parse", response_model=BaseResponse, summary="解析消息中的标记为片段列表")
def parse_message(request: FormatRequest):
    segments = parse_formatted_content(request.content)
    return _ok({
        "segments": [s.to_dict() for s in segments],
        "has_formatting": has_formatting(request.content),
    })


@router.post("/strip", response_model=BaseResponse, summary="转为纯文本（语音/分析用）")
def strip_message(request: FormatRequest):
    return _ok({"plain_text": strip_formatting(request.content)})


@router.post("/extract", response_model=BaseResponse, summary="提取各类标记的原始内容与计数")
def extract_markers(request: FormatRequest):
    content = request.content
    data = ExtractionModel(
        errors=extract_errors(content),
        corrections=extract_corrections(content),
        notes=extract_notes(content),
        tips=extract_tips(content),
        important=extract_important(content),
        counts=count_formatted_elements(content).to_dict(),
    )
    return _ok(data.model_dump())


@router.post("/speech", response_model=BaseResponse, summary="清理为可朗读文本")
def speech_text(request: SpeechRequest):
    cleaner = SpeechTextCleaner()
    result = cleaner.validate(request.content, request.language)
    data = SpeechModel(
        valid=result.valid,
        cleaned=result.cleaned,
        error=result.error,
        voice_codes=cleaner.voice_codes(request.language),
    )
    return _ok(data.model_dump())


@router.post("/batch", response_model=BaseResponse, summary="批量格式化多条消息")
def format_batch(request: BatchFormatRequest):
    """一次返回每条消息的片段、纯文本与计数，顺序与请求一致"""
    formatter = MessageFormatter()
    results = formatter.format_batch(request.contents)
    # 与 /parse 保持一致：省略空的可选字段，保留字段使用 originalText 命名
    return _ok([
        FormattedMessageModel(**r.to_dict()).model_dump(by_alias=True, exclude_none=True)
        for r in results
    ])
