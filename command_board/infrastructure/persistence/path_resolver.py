"""
路径解析 - 基础设施层

由应用数据根目录推导数据文件和备份目录的位置。
根目录由宿主环境注入，测试中可直接指向临时目录。
"""

import os
import sys
from pathlib import Path
from typing import Optional, Union

from command_board import config
from command_board.domain.errors import AppDataRootError, StorageIOError


class PathResolver:
    """数据文件 / 备份目录路径解析器"""

    def __init__(self, app_data_root: Union[str, Path],
                 storage: Optional[config.StorageConfig] = None):
        self.app_data_root = Path(app_data_root)
        self.storage = storage or config.storage_config

    def data_file_path(self) -> Path:
        """数据文件路径（确保根目录存在）"""
        _ensure_dir(self.app_data_root)
        return self.app_data_root / self.storage.data_file_name

    def backups_dir_path(self) -> Path:
        """备份目录路径（确保目录存在）"""
        backups_dir = self.app_data_root / self.storage.backups_dir_name
        _ensure_dir(backups_dir)
        return backups_dir


def _ensure_dir(path: Path) -> None:
    """
    创建目录（已存在时忽略）

    Raises:
        StorageIOError: 目录无法创建（权限不足、路径被同名文件占用等）
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageIOError(f"创建数据目录失败: {e}") from e


def resolve_app_data_root(app_identifier: str = config.APP_IDENTIFIER) -> Path:
    """
    解析平台应用数据目录

    优先使用 COMMAND_BOARD_DATA_DIR，否则:
    - Windows: %APPDATA%/<app_identifier>
    - macOS: ~/Library/Application Support/<app_identifier>
    - 其他: $XDG_DATA_HOME/<app_identifier> 或 ~/.local/share/<app_identifier>

    Raises:
        AppDataRootError: 无法确定用户目录
    """
    override = config.storage_config.data_dir
    if override:
        return Path(override).expanduser()

    try:
        if sys.platform.startswith('win'):
            base = os.environ.get('APPDATA')
            root = Path(base) if base else Path.home() / 'AppData' / 'Roaming'
        elif sys.platform == 'darwin':
            root = Path.home() / 'Library' / 'Application Support'
        else:
            base = os.environ.get('XDG_DATA_HOME')
            root = Path(base) if base else Path.home() / '.local' / 'share'
    except RuntimeError as e:
        raise AppDataRootError(f"无法获取应用数据目录: {e}") from e

    return root / app_identifier
