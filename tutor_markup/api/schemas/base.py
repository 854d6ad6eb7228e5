from __future__ import annotations

"""
统一响应基类定义

说明：
- 所有 API 响应均使用 Envelope 外壳，便于统一观测与前端解析。
"""

from typing import Any, Optional
from pydantic import BaseModel, Field


class BaseResponse(BaseModel):
    """统一基础响应模型。

    Attributes:
        code: 业务状态码。0 表示成功，非 0 表示具体错误。
        message: 人类可读的结果描述。
        data: 业务数据载荷，成功时为对象/列表，失败时可为 None。
        request_id: 本次请求唯一 ID，用于链路追踪。
        timestamp: ISO8601 时间戳（UTC）。
        meta: 可选的额外元信息。
    """

    code: int = Field(0, description="业务状态码，0表示成功")
    message: str = Field("success", description="结果描述")
    data: Optional[Any] = Field(None, description="业务数据")
    request_id: str = Field("", description="请求唯一ID")
    timestamp: str = Field("", description="ISO8601时间戳")
    meta: Optional[dict] = Field(default=None, description="额外元信息")
