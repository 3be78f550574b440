import customtkinter as ctk
from tkinter import messagebox
import time

from command_board.application.services import TaskDataService, describe_error
from command_board.config import ui_config
from command_board.domain.entities import BackupEntry
from command_board.domain.errors import StorageError
from command_board.ui.dialogs import export_with_dialog
from command_board.ui.styles import ThemeColors, UIStyles

class CommandBoardWindow(ctk.CTk):
    """数据文件概览: 文档统计、备份列表、导出与恢复"""

    def __init__(self, service: TaskDataService):
        super().__init__()

        self.service = service

        # --- 窗口基础设置 ---
        self.title(ui_config.window_title)
        self.geometry(ui_config.window_size)
        self.configure(fg_color=ThemeColors.BG_DARK)

        self.summary_var = ctk.StringVar(value="尚未加载")
        self.selected_backup = ctk.StringVar(value="")
        self._backup_names = {}

        self._create_header()
        self._create_main_content()
        self._create_footer()

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self.action_reload()

    def _create_header(self):
        header_frame = ctk.CTkFrame(self, fg_color=ThemeColors.BG_SECONDARY, corner_radius=0, height=60)
        header_frame.grid(row=0, column=0, sticky="ew")
        ctk.CTkLabel(header_frame, text=ui_config.window_title, font=ctk.CTkFont(family=UIStyles.FONT_FAMILY, size=20, weight="bold"), text_color=ThemeColors.TEXT_PRIMARY).pack(side="left", padx=20, pady=12)
        ctk.CTkLabel(header_frame, textvariable=self.summary_var, font=ctk.CTkFont(family=UIStyles.FONT_FAMILY, size=12), text_color=ThemeColors.TEXT_SECONDARY).pack(side="right", padx=20)

    def _create_main_content(self):
        main_frame = ctk.CTkFrame(self, fg_color="transparent")
        main_frame.grid(row=1, column=0, sticky="nsew", padx=20, pady=15)
        main_frame.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(main_frame, text="自动备份（最近 5 份）", font=ctk.CTkFont(family=UIStyles.FONT_FAMILY, size=13, weight="bold"), text_color=ThemeColors.TEXT_PRIMARY).grid(row=0, column=0, sticky="w")
        self.backup_dropdown = ctk.CTkComboBox(main_frame, variable=self.selected_backup, values=["暂无备份"], state="readonly", height=36)
        self.backup_dropdown.grid(row=1, column=0, sticky="ew", pady=(8, 12))

        button_row = ctk.CTkFrame(main_frame, fg_color="transparent")
        button_row.grid(row=2, column=0, sticky="ew")
        ctk.CTkButton(button_row, text="🔄 重新加载", command=self.action_reload).pack(side="left", padx=(0, 8))
        ctk.CTkButton(button_row, text="📤 导出...", command=self.action_export).pack(side="left", padx=8)
        ctk.CTkButton(button_row, text="⏪ 从备份恢复", command=self.action_restore).pack(side="left", padx=8)

    def _create_footer(self):
        self.status_label = ctk.CTkLabel(self, text="", anchor="w", font=ctk.CTkFont(family=UIStyles.FONT_FAMILY, size=11), text_color=ThemeColors.TEXT_MUTED)
        self.status_label.grid(row=2, column=0, sticky="ew", padx=20, pady=(0, 10))

    def add_log(self, message, m_type="info"):
        """状态栏日志（也作为日志器的 UI 回调）"""
        t = time.strftime("%H:%M:%S")
        color = ThemeColors.LEVEL_COLORS.get(m_type, ThemeColors.TEXT_MUTED)
        self.status_label.configure(text=f"[{t}] {message}", text_color=color)

    def action_reload(self):
        try:
            data = self.service.load_tasks()
        except StorageError as e:
            self.summary_var.set("数据文件无法加载")
            messagebox.showerror("加载失败", describe_error(e), parent=self)
            return
        self.summary_var.set(f"{len(data['tasks'])} 个任务 · {len(data['labels'])} 个标签 · {len(data['stakeholders'])} 个相关人")
        self._refresh_backups()

    def action_export(self):
        export_with_dialog(self.service, parent=self)

    def action_restore(self):
        name = self._backup_names.get(self.selected_backup.get())
        if not name:
            messagebox.showwarning("提示", "请先选择一个备份", parent=self)
            return
        if not messagebox.askyesno("确认恢复", f"将用备份 {name} 覆盖当前数据（当前数据会先被备份），是否继续？", parent=self):
            return
        try:
            self.service.restore_backup(name)
        except StorageError as e:
            messagebox.showerror("恢复失败", describe_error(e), parent=self)
            return
        self.action_reload()

    def _refresh_backups(self):
        try:
            entries = self.service.list_backups()
        except StorageError as e:
            self.add_log(describe_error(e), "error")
            entries = []
        self._backup_names = {backup_label(entry): entry.name for entry in entries}
        labels = list(self._backup_names) or ["暂无备份"]
        self.backup_dropdown.configure(values=labels)
        self.selected_backup.set(labels[0])


def backup_label(entry: BackupEntry) -> str:
    """下拉框显示文本: 备份时间 · 文件名"""
    return f"{entry.modified_at.strftime('%Y-%m-%d %H:%M:%S')} · {entry.name}"
