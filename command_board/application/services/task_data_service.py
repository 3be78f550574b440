"""
任务数据服务

宿主界面调用的命令入口: 加载 / 保存 / 导出 / 备份列表 / 从备份恢复。
"""

from typing import Any, Dict, List, Optional, Union
from pathlib import Path

from command_board.domain.entities import BackupEntry, TaskDocument
from command_board.domain.errors import BackupNotFoundError, StorageError
from command_board.infrastructure.persistence import DocumentStore
from command_board.utils.logger import BoardLogger, get_logger


def describe_error(error: Exception) -> str:
    """返回展示给用户的错误描述"""
    if isinstance(error, StorageError):
        return str(error)
    return f"未知错误: {error}"


class TaskDataService:
    """
    任务数据服务

    职责:
    - 将 JSON 载荷与 TaskDocument 互相转换
    - 记录每个命令的结果
    - StorageError 原样抛给调用方，由界面展示
    """

    def __init__(self, store: DocumentStore, logger: Optional[BoardLogger] = None):
        self.store = store
        self.logger = logger or get_logger(__name__)

    def load_tasks(self) -> Dict[str, Any]:
        try:
            document = self.store.load()
        except StorageError as e:
            self.logger.error(f"加载任务失败: {e}")
            raise
        self.logger.info(
            f"已加载 {len(document.tasks)} 个任务, "
            f"{len(document.labels)} 个标签, {len(document.stakeholders)} 个相关人"
        )
        return document.to_dict()

    def save_tasks(self, data: Dict[str, Any]) -> None:
        try:
            document = TaskDocument.from_dict(data)
            self.store.save(document)
        except StorageError as e:
            self.logger.error(f"保存任务失败: {e}")
            raise
        self.logger.success(f"已保存 {len(document.tasks)} 个任务")

    def export_tasks(self, export_path: Union[str, Path]) -> None:
        try:
            self.store.export(export_path)
        except StorageError as e:
            self.logger.error(f"导出任务失败: {e}")
            raise
        self.logger.success(f"任务已导出到: {export_path}")

    def list_backups(self) -> List[BackupEntry]:
        return self.store.rotator.list_backups()

    def restore_backup(self, name: str) -> TaskDocument:
        """
        从备份恢复

        通过正常保存流程写回，因此当前数据会先被备份。

        Args:
            name: 备份文件名

        Returns:
            恢复后的任务文档
        """
        try:
            entry = self._find_backup(name)
            document = self.store.read_document(entry.path)
            self.store.save(document)
        except StorageError as e:
            self.logger.error(f"恢复备份失败: {e}")
            raise
        self.logger.success(f"已从备份恢复: {name}")
        return document

    def _find_backup(self, name: str) -> BackupEntry:
        for entry in self.list_backups():
            if entry.name == name:
                return entry
        raise BackupNotFoundError(f"备份不存在: {name}")
