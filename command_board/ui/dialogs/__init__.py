"""
对话框模块
"""

from .export_dialog import export_with_dialog, default_export_name

__all__ = [
    'export_with_dialog',
    'default_export_name',
]
