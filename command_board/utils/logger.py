"""
Command Board 日志系统

提供统一的日志接口，支持:
- 标准 Python logging 模块
- UI 回调日志（同步显示到窗口状态栏）
- 文件日志输出

用法:
    from command_board.utils.logger import get_logger, setup_logging

    # 初始化日志系统（应用启动时调用）
    setup_logging()

    # 获取模块日志器
    logger = get_logger(__name__)
    logger.info("已加载任务数据")
    logger.success("任务数据已保存")
"""

import logging
import sys
from pathlib import Path
from typing import Callable, Optional


# UI 回调签名: (message, level) -> None
UICallback = Callable[[str, str], None]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
TIME_FORMAT = "%H:%M:%S"

# 自定义 success 级别（25，介于 INFO=20 和 WARNING=30 之间）
SUCCESS_LEVEL = 25
logging.addLevelName(SUCCESS_LEVEL, 'SUCCESS')


class BoardLogger:
    """
    日志封装

    在标准 logging 基础上增加 success 级别和 UI 回调。
    UI 回调抛出的异常不会影响日志记录本身。
    """

    def __init__(self, name: str, ui_callback: Optional[UICallback] = None):
        """
        Args:
            name: 日志器名称（通常为 __name__）
            ui_callback: UI 回调函数
        """
        self.logger = logging.getLogger(name)
        self.ui_callback = ui_callback

    def _emit(self, level: int, message: str, level_name: str):
        self.logger.log(level, message)
        if self.ui_callback:
            try:
                self.ui_callback(message, level_name)
            except Exception:
                self.logger.debug("UI 日志回调失败", exc_info=True)

    def debug(self, message: str):
        self._emit(logging.DEBUG, message, "debug")

    def info(self, message: str):
        self._emit(logging.INFO, message, "info")

    def success(self, message: str):
        """成功级别日志（带 ✅ 前缀）"""
        self._emit(SUCCESS_LEVEL, f"✅ {message}", "success")

    def warning(self, message: str):
        self._emit(logging.WARNING, message, "warning")

    def error(self, message: str):
        self._emit(logging.ERROR, message, "error")

    def critical(self, message: str):
        self._emit(logging.CRITICAL, message, "critical")

    def set_ui_callback(self, callback: Optional[UICallback]):
        """设置或更新 UI 回调"""
        self.ui_callback = callback


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    format_string: str = DEFAULT_FORMAT
):
    """
    初始化日志系统

    Args:
        level: 日志级别
        log_file: 日志文件路径（可选）
        format_string: 日志格式
    """
    handlers = [logging.StreamHandler(sys.stdout)]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=level,
        format=format_string,
        datefmt=TIME_FORMAT,
        handlers=handlers,
        force=True
    )

    # 降低第三方库日志级别
    logging.getLogger('PIL').setLevel(logging.WARNING)


def get_logger(name: str, ui_callback: Optional[UICallback] = None) -> BoardLogger:
    """获取模块日志器"""
    return BoardLogger(name, ui_callback)

