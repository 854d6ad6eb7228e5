# 文件: tutor_markup/core/exceptions.py

import logging
from datetime import datetime
from typing import List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.responses import JSONResponse

logger = logging.getLogger(__name__)


# 自定义异常类
class FormattingError(Exception):
    """消息格式化异常"""
    pass


class InvalidContentError(FormattingError, TypeError):
    """待格式化内容不是字符串"""
    pass


def _error_response(status_code: int, code, message, errors: Optional[List[str]] = None) -> JSONResponse:
    # 延迟导入，避免与 api 包循环导入
    from tutor_markup.api.schemas import BaseResponse

    body = BaseResponse(
        code=code,
        message=message,
        data={"errors": errors or []},
        request_id="",
        timestamp=datetime.utcnow().isoformat() + "Z",
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def validation_exception_handler(request: Request, exc: Exception):
    """
    捕获并自定义处理请求体参数验证错误
    """
    from tutor_markup.api.schemas import ResponseCode, ResponseMessage

    # 确认是请求验证异常后再调用 exc.errors()
    if isinstance(exc, RequestValidationError):
        error_messages = [error["msg"] for error in exc.errors()]
        return _error_response(422, ResponseCode.VALIDATION_ERROR, ResponseMessage.VALIDATION_ERROR, error_messages)
    return _error_response(500, ResponseCode.UNKNOWN_ERROR, ResponseMessage.UNKNOWN_ERROR)


async def formatting_exception_handler(request: Request, exc: Exception):
    """格式化过程中的业务异常，统一包装为标准响应"""
    from tutor_markup.api.schemas import ResponseCode, ResponseMessage

    logger.warning(f"消息格式化失败: {exc}")
    return _error_response(400, ResponseCode.BAD_REQUEST, ResponseMessage.BAD_REQUEST, [str(exc)])


def register_exception_handlers(app: FastAPI) -> None:
    """
    将自定义的异常处理器注册到 FastAPI 应用实例上
    """
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(FormattingError, formatting_exception_handler)
