"""
持久化基础设施模块

提供任务文档的加载、保存、导出以及滚动备份功能。
"""
from .path_resolver import PathResolver, resolve_app_data_root
from .backup_rotator import BackupRotator
from .document_store import DocumentStore

__all__ = [
    'PathResolver',
    'resolve_app_data_root',
    'BackupRotator',
    'DocumentStore',
]
