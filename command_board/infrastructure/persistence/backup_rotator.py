"""
滚动备份 - 基础设施层

每次覆盖数据文件之前，把当前数据文件复制为带时间戳的备份，
然后按修改时间从旧到新清理，只保留最近 max_backups 份。

备份复制失败会中止保存；清理阶段的单个删除失败只记录警告。
"""

import shutil
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

from command_board.domain.entities import BackupEntry
from command_board.domain.errors import BackupError, StorageIOError
from command_board.infrastructure.persistence.path_resolver import PathResolver
from command_board.utils.logger import get_logger


logger = get_logger(__name__)


class BackupRotator:
    """备份创建与轮转"""

    def __init__(
        self,
        resolver: PathResolver,
        max_backups: Optional[int] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Args:
            resolver: 路径解析器
            max_backups: 保留数量，默认取 StorageConfig.max_backups
            clock: 时间来源（测试时可注入）
        """
        self.resolver = resolver
        self.storage = resolver.storage
        self.max_backups = self.storage.max_backups if max_backups is None else max_backups
        self.clock = clock

    def create_backup(self) -> Optional[Path]:
        """
        备份当前数据文件

        Returns:
            新备份的路径；数据文件不存在时返回 None

        Raises:
            BackupError: 复制失败
        """
        data_path = self.resolver.data_file_path()
        if not data_path.exists():
            return None

        try:
            backup_path = self._next_backup_path()
            shutil.copyfile(data_path, backup_path)
        except (OSError, StorageIOError) as e:
            raise BackupError(f"创建备份失败: {e}") from e

        logger.debug(f"已创建备份: {backup_path.name}")
        self.prune()
        return backup_path

    def list_backups(self) -> List[BackupEntry]:
        """
        列出备份集（最新在前）

        Raises:
            StorageIOError: 备份目录无法读取
        """
        backups_dir = self.resolver.backups_dir_path()
        entries = []
        try:
            candidates = list(backups_dir.iterdir())
        except OSError as e:
            raise StorageIOError(f"读取备份目录失败: {e}") from e

        for path in candidates:
            if not path.name.startswith(self.storage.backup_prefix):
                continue
            try:
                stat = path.stat()
            except OSError:
                # 枚举后被删除
                continue
            entries.append(BackupEntry(path=path, modified_ns=stat.st_mtime_ns))

        entries.sort(key=BackupEntry.sort_key, reverse=True)
        return entries

    def prune(self) -> List[Path]:
        """
        删除超出保留数量的旧备份

        Returns:
            成功删除的备份路径
        """
        try:
            backups = self.list_backups()
        except StorageIOError as e:
            logger.warning(f"清理备份跳过: {e}")
            return []

        removed = []
        for entry in backups[self.max_backups:]:
            try:
                entry.path.unlink()
                removed.append(entry.path)
            except OSError as e:
                logger.warning(f"删除旧备份失败 {entry.name}: {e}")

        if removed:
            logger.debug(f"已清理 {len(removed)} 个旧备份")
        return removed

    def _next_backup_path(self) -> Path:
        """
        生成备份文件名

        同一秒内已有备份时追加序号，序号总是大于该秒现存的最大序号，
        清理后空出的文件名不会被复用。
        """
        backups_dir = self.resolver.backups_dir_path()
        stamp = self.clock().strftime(self.storage.backup_timestamp_format)
        stem = f"{self.storage.backup_prefix}{stamp}"

        taken = []
        for path in backups_dir.glob(f"{stem}*.json"):
            if path.stem == stem:
                taken.append(0)
                continue
            suffix = path.stem[len(stem):]
            if suffix.startswith('_') and suffix[1:].isdigit():
                taken.append(int(suffix[1:]))

        if not taken:
            return backups_dir / f"{stem}.json"
        return backups_dir / f"{stem}_{max(taken) + 1}.json"
