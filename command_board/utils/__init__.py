"""
Utils 模块初始化文件
"""

from .logger import BoardLogger, get_logger, setup_logging

__all__ = [
    'BoardLogger',
    'get_logger',
    'setup_logging',
]
