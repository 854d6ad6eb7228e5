import json
from typing import Dict, Any
from pathlib import Path


class ConfigManager:
    """配置管理器，从JSON文件读取配置"""

    def __init__(self, config_file: str = "config/app_config.json"):
        self.config_file = config_file
        self._config_data = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """从JSON文件加载配置"""
        project_root = Path(__file__).parent.parent

        # 相对于项目根目录解析，无论从哪个目录启动都能找到 config/app_config.json
        config_path = project_root / self.config_file

        if not config_path.exists():
            raise FileNotFoundError(f"配置文件不存在: {self.config_file}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except Exception as e:
            raise RuntimeError(f"无法加载配置文件 {self.config_file}: {e}")

    def get_config(self, section: str = None) -> Dict[str, Any]:
        """获取配置数据"""
        if section:
            return self._config_data.get(section, {})
        return self._config_data

    def get_server_config(self) -> Dict[str, Any]:
        """获取服务器配置"""
        return self._config_data.get("server", {})

    def get_logging_config(self) -> Dict[str, Any]:
        """获取日志配置"""
        return self._config_data.get("logging", {})

    def get_formatting_config(self) -> Dict[str, Any]:
        """获取消息格式化配置（批量并发数、分批大小等）"""
        return self._config_data.get("formatting", {})

    def get_speech_config(self) -> Dict[str, Any]:
        """获取朗读文本清理配置

        Returns:
            Dict[str, Any]: 包含 max_length、default_language、convert_numbers
        """
        return self._config_data.get("speech", {})

    def reload_config(self):
        """重新加载配置文件"""
        self._config_data = self._load_config()


# 全局配置管理器实例
_config_manager = ConfigManager()


def get_config_manager() -> ConfigManager:
    """获取配置管理器实例"""
    return _config_manager


def get_config(section: str = None) -> Dict[str, Any]:
    """获取配置数据的便捷函数"""
    return _config_manager.get_config(section)
