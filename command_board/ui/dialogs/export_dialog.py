"""
导出对话框

弹出文件保存对话框，把当前数据文件导出到用户选择的位置。
"""

from datetime import datetime
from tkinter import messagebox
from typing import Any, Callable, Optional

import customtkinter as ctk

from command_board.application.services import TaskDataService, describe_error
from command_board.config import ui_config
from command_board.domain.errors import StorageError


def default_export_name(now: Optional[datetime] = None) -> str:
    """默认导出文件名"""
    now = now or datetime.now()
    return f"{ui_config.export_default_prefix}{now.strftime('%Y%m%d_%H%M%S')}.json"


def export_with_dialog(
    service: TaskDataService,
    parent: Any = None,
    clock: Callable[[], datetime] = datetime.now,
) -> Optional[str]:
    """
    选择导出路径并执行导出

    Args:
        service: 任务数据服务
        parent: 父窗口
        clock: 时间来源（用于默认文件名）

    Returns:
        导出成功时返回目标路径；取消或失败返回 None
    """
    filepath = ctk.filedialog.asksaveasfilename(
        parent=parent,
        defaultextension=".json",
        filetypes=[("JSON 文件", "*.json"), ("所有文件", "*.*")],
        initialfile=default_export_name(clock()),
        title="导出任务数据"
    )
    if not filepath:
        return None

    try:
        service.export_tasks(filepath)
    except StorageError as e:
        messagebox.showerror("导出失败", describe_error(e), parent=parent)
        return None

    messagebox.showinfo("导出成功", f"任务数据已导出到:\n{filepath}", parent=parent)
    return filepath
