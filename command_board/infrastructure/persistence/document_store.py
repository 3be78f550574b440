"""
任务文档存储 - 基础设施层

负责任务文档的加载、保存和导出。
保存前总是先通过 BackupRotator 备份现有数据文件，备份失败则不写入。
"""

import json
import os
import shutil
from pathlib import Path
from typing import Optional, Union

from command_board.domain.entities import TaskDocument
from command_board.domain.errors import (
    CorruptDataError,
    NoDataToExportError,
    SerializationError,
    StorageIOError,
)
from command_board.infrastructure.persistence.backup_rotator import BackupRotator
from command_board.infrastructure.persistence.path_resolver import PathResolver
from command_board.utils.logger import get_logger


logger = get_logger(__name__)


class DocumentStore:
    """
    任务文档存储

    不在内存中缓存任何状态，每次操作都直接读写磁盘。
    不做加锁，假定单进程单写者使用。
    """

    def __init__(self, resolver: PathResolver, rotator: Optional[BackupRotator] = None):
        self.resolver = resolver
        self.rotator = rotator or BackupRotator(resolver)

    def load(self) -> TaskDocument:
        """
        加载任务文档

        数据文件不存在时返回空文档（首次运行）。

        Raises:
            StorageIOError: 数据目录无法创建或文件无法读取
            CorruptDataError: 文件内容无法解析
        """
        path = self.resolver.data_file_path()
        if not path.exists():
            logger.debug("数据文件不存在，使用空文档")
            return TaskDocument.empty()
        return self.read_document(path)

    def read_document(self, path: Path) -> TaskDocument:
        """从指定文件解析任务文档（数据文件或备份文件）"""
        try:
            content = path.read_text(encoding='utf-8')
        except UnicodeDecodeError as e:
            raise CorruptDataError(f"解析任务数据失败: {e}") from e
        except OSError as e:
            raise StorageIOError(f"读取任务文件失败: {e}") from e

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise CorruptDataError(f"解析任务数据失败: {e}") from e

        return TaskDocument.from_dict(data)

    def save(self, document: TaskDocument) -> None:
        """
        保存任务文档（整体覆盖）

        Raises:
            BackupError: 备份失败，数据文件未被改动
            SerializationError: 文档无法编码为 JSON
            StorageIOError: 写入失败
        """
        self.rotator.create_backup()

        path = self.resolver.data_file_path()
        content = self._serialize(document)
        self._write_atomic(path, content)
        logger.debug(f"已保存 {len(document.tasks)} 个任务")

    def export(self, destination: Union[str, Path]) -> None:
        """
        导出数据文件到指定路径（直接复制，覆盖目标）

        Raises:
            NoDataToExportError: 数据文件不存在
            StorageIOError: 数据目录无法创建或复制失败
        """
        path = self.resolver.data_file_path()
        if not path.exists():
            raise NoDataToExportError("没有可导出的数据文件")

        try:
            shutil.copyfile(path, destination)
        except OSError as e:
            raise StorageIOError(f"导出任务失败: {e}") from e

    def _serialize(self, document: TaskDocument) -> str:
        try:
            return json.dumps(
                document.to_dict(),
                ensure_ascii=False,
                indent=self.resolver.storage.json_indent,
                allow_nan=False,
            )
        except (TypeError, ValueError) as e:
            raise SerializationError(f"序列化任务数据失败: {e}") from e

    @staticmethod
    def _write_atomic(path: Path, content: str) -> None:
        """先写临时文件再替换，避免中途崩溃留下截断的数据文件"""
        tmp_path = path.with_name(path.name + '.tmp')
        try:
            with open(tmp_path, 'w', encoding='utf-8') as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, path)
        except OSError as e:
            try:
                tmp_path.unlink()
            except OSError:
                pass
            raise StorageIOError(f"写入任务文件失败: {e}") from e
