# Domain Entities

"""
领域实体 - 核心业务对象

提供持久化核心的数据模型，不依赖任何外部框架。
"""

from .task_document import TaskDocument, DOCUMENT_KEYS
from .backup_entry import BackupEntry

__all__ = [
    'TaskDocument',
    'DOCUMENT_KEYS',
    'BackupEntry',
]
