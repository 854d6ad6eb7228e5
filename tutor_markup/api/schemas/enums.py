from __future__ import annotations

"""
统一响应码与消息枚举

说明：
- 本文件定义了所有 API 的标准响应码与默认消息文案，避免各处硬编码。
- `ResponseCode` 采用 `IntEnum`（整数枚举），便于前端/日志/监控统计；
- `ResponseMessage` 采用 `Enum` + `str` 混合基类，表示“具备字符串值的枚举”。
"""

from enum import IntEnum, Enum


class ResponseCode(IntEnum):
    """业务级响应码（整数型）。

    约定：
    - 0：通用成功
    - 1xxx：客户端/参数类错误
    - 2xxx：服务端错误
    - 9999：未知错误
    """

    OK = 0  # 通用成功

    # 1xxx - 客户端错误/参数错误
    BAD_REQUEST = 1001  # 请求不合法（内容类型不符等）
    VALIDATION_ERROR = 1002  # 请求体校验失败

    # 2xxx - 服务端错误
    HEALTH_ERROR = 2000  # 健康检查失败

    # 9xxx - 兜底
    UNKNOWN_ERROR = 9999  # 未归类错误


class ResponseMessage(str, Enum):
    """默认响应文案（字符串枚举）。"""

    SUCCESS = "success"  # 成功
    BAD_REQUEST = "bad_request"  # 客户端请求不合法
    VALIDATION_ERROR = "validation_error"  # 参数校验失败
    HEALTH_ERROR = "health_check_error"  # 健康检查失败
    UNKNOWN_ERROR = "unknown_error"  # 未知错误
