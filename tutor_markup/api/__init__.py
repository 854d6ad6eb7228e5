"""FastAPI 应用模块初始化。

按业务领域组织路由：系统健康检查、消息格式化。
"""
from fastapi import FastAPI
from tutor_markup.core.exceptions import register_exception_handlers
from tutor_markup.infra.logging import setup_logging
from .health import router as health_router
from .formatting import router as formatting_router


def create_app() -> FastAPI:
    """创建并配置 FastAPI 应用。"""
    # 确保日志系统已初始化
    setup_logging()

    app = FastAPI(
        title="Tutor Markup API",
        version="0.1.0",
        description="AI 导师消息标记解析与纯文本化服务",
    )
    register_exception_handlers(app)
    # 健康检查路由
    app.include_router(health_router, tags=["system"])

    # 消息格式化路由
    app.include_router(formatting_router, prefix="/formatting", tags=["formatting"])

    return app
