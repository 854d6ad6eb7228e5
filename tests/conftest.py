# -*- coding: utf-8 -*-
"""
Pytest 全局配置：
- 确保 tests 运行时可以导入项目根目录下的 tutor_markup 包
- 提供可替换的配置管理器 Mock，避免测试依赖真实配置文件的取值
"""
import logging
import sys
from pathlib import Path
from unittest.mock import Mock

import pytest


# 1) 确保将项目根目录加入 sys.path，便于 `from tutor_markup ...` 导入
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


# 2) 配置管理器 Mock：按段返回给定字典
@pytest.fixture
def config_stub():
    def _build(formatting=None, speech=None, logging_config=None):
        manager = Mock(name="ConfigManager")
        manager.get_formatting_config.return_value = formatting or {}
        manager.get_speech_config.return_value = speech or {}
        manager.get_logging_config.return_value = logging_config or {}
        return manager

    return _build


# 3) setup_logging 会替换根日志处理器，测试结束后恢复
@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield root
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
