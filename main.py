import uvicorn
from tutor_markup.api import create_app
from tutor_markup.infra.logging import setup_logging
from tutor_markup.config import get_config_manager

# 初始化日志系统
setup_logging()

app = create_app()

if __name__ == '__main__':
    # 从配置文件读取服务器配置
    server_config = get_config_manager().get_server_config()

    host = server_config.get("host", "0.0.0.0")
    port = server_config.get("port", 8000)
    reload = server_config.get("reload", False)

    if reload:
        # 使用字符串形式启用热重载
        uvicorn.run("main:app", host=host, port=port, reload=True)
    else:
        uvicorn.run(app, host=host, port=port, reload=False)
