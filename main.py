"""
Command Board - 任务看板桌面应用

程序入口: 初始化日志，解析应用数据目录，组装存储服务并启动主窗口。
"""

import sys
import os

# 确保程序根目录在 Python 路径中
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from command_board.config import logging_config
from command_board.domain.errors import AppDataRootError
from command_board.infrastructure.persistence import (
    BackupRotator, DocumentStore, PathResolver, resolve_app_data_root
)
from command_board.application.services import TaskDataService
from command_board.utils.logger import get_logger, setup_logging


def build_service(app_data_root) -> TaskDataService:
    """按应用数据目录组装任务数据服务"""
    resolver = PathResolver(app_data_root)
    store = DocumentStore(resolver, BackupRotator(resolver))
    return TaskDataService(store)


def main():
    """程序入口"""
    setup_logging(level=logging_config.level, log_file=logging_config.log_file)
    logger = get_logger("command_board")

    try:
        app_data_root = resolve_app_data_root()
    except AppDataRootError as e:
        logger.critical(str(e))
        sys.exit(1)

    logger.info(f"应用数据目录: {app_data_root}")
    service = build_service(app_data_root)

    from command_board.ui.styles import UIStyles
    from command_board.ui.main_window import CommandBoardWindow

    UIStyles.apply_global_styles()
    app = CommandBoardWindow(service)
    service.logger.set_ui_callback(app.add_log)
    app.mainloop()


if __name__ == "__main__":
    main()
