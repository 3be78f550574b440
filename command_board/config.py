"""
Command Board 配置中心

集中管理存储、日志和界面参数，避免硬编码散落在各模块中。
支持从环境变量读取配置。

用法:
    from command_board.config import storage_config, logging_config

    data_file = storage_config.data_file_name
    level = logging_config.level
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional


# 备份保留数量（固定值，不支持环境变量覆盖）
MAX_BACKUPS = 5

# 应用标识，用于拼接平台应用数据目录
APP_IDENTIFIER = "com.commandboard.app"


@dataclass
class StorageConfig:
    """
    存储配置

    控制数据文件和备份文件的命名与位置。
    """
    data_dir: Optional[str] = None              # 应用数据目录覆盖（为空时按平台解析）
    data_file_name: str = "tasks.json"          # 数据文件名
    backups_dir_name: str = "backups"           # 备份目录名
    backup_prefix: str = "tasks_backup_"        # 备份文件名前缀
    backup_timestamp_format: str = "%Y%m%d_%H%M%S"  # 备份时间戳格式（秒级）
    json_indent: int = 2                        # JSON 缩进
    max_backups: int = MAX_BACKUPS              # 备份保留数量


@dataclass
class LoggingConfig:
    """日志配置"""
    level: int = logging.INFO
    log_file: Optional[str] = None


@dataclass
class UIConfig:
    """
    UI 配置

    控制界面相关参数。
    """
    window_title: str = "Command Board"
    window_size: str = "520x420"
    export_default_prefix: str = "tasks_export_"


def _get_env_int(key: str, default: int) -> int:
    """从环境变量获取整数配置"""
    value = os.environ.get(key)
    if value:
        try:
            return int(value)
        except ValueError:
            pass
    return default


def _get_env_str(key: str, default: Optional[str] = None) -> Optional[str]:
    """从环境变量获取字符串配置（空字符串视为未设置）"""
    value = os.environ.get(key)
    if value and value.strip():
        return value.strip()
    return default


def _get_env_log_level(key: str, default: int) -> int:
    """从环境变量获取日志级别，支持名称 (DEBUG) 或数值 (10)"""
    value = _get_env_str(key)
    if value is None:
        return default
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else default


def _build_storage_config() -> StorageConfig:
    return StorageConfig(data_dir=_get_env_str('COMMAND_BOARD_DATA_DIR'))


def _build_logging_config() -> LoggingConfig:
    return LoggingConfig(
        level=_get_env_log_level('COMMAND_BOARD_LOG_LEVEL', logging.INFO),
        log_file=_get_env_str('COMMAND_BOARD_LOG_FILE'),
    )


# ============================================================
# 全局配置实例
# ============================================================

storage_config = _build_storage_config()

logging_config = _build_logging_config()

ui_config = UIConfig()


# ============================================================
# 便捷函数
# ============================================================

def reload_config():
    """
    重新加载配置

    从环境变量重新读取配置。
    """
    global storage_config, logging_config

    storage_config = _build_storage_config()
    logging_config = _build_logging_config()
