from fastapi import APIRouter
from datetime import datetime

from ..config import get_config_manager
from ..formatting import MarkerName
from .schemas import BaseResponse, HealthData, ResponseCode, ResponseMessage

router = APIRouter()


@router.get("/health", response_model=BaseResponse)
def health_check():
    """健康检查接口，返回系统状态与支持的标记"""
    try:
        config_manager = get_config_manager()
        sections = {
            "server": bool(config_manager.get_server_config()),
            "logging": bool(config_manager.get_logging_config()),
            "formatting": bool(config_manager.get_formatting_config()),
            "speech": bool(config_manager.get_speech_config()),
        }

        return BaseResponse(
            code=ResponseCode.OK,
            message=ResponseMessage.SUCCESS,
            data=HealthData(
                status="healthy",
                message="系统运行正常",
                markers=[name.value for name in MarkerName],
                config_sections=sections,
            ).model_dump(),
            request_id="",
            timestamp=datetime.utcnow().isoformat() + "Z",
        )
    except Exception as e:
        return BaseResponse(
            code=ResponseCode.HEALTH_ERROR,
            message=ResponseMessage.HEALTH_ERROR,
            data=HealthData(
                status="unhealthy",
                message=f"系统异常: {str(e)}",
                markers=[],
                config_sections={},
            ).model_dump(),
            request_id="",
            timestamp=datetime.utcnow().isoformat() + "Z",
        )
