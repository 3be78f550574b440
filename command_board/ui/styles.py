import customtkinter as ctk

class ThemeColors:
    """系统配色 (极简黑白灰)"""
    BG_DARK = "#FFFFFF"           # 纯白背景
    BG_SECONDARY = "#F5F5F7"      # 浅灰背景

    ACCENT_PRIMARY = "#000000"    # 主强调色

    TEXT_PRIMARY = "#000000"      # 标题
    TEXT_SECONDARY = "#6E6E73"    # 副标题
    TEXT_MUTED = "#86868B"        # 辅助文字

    # 状态栏按日志级别着色
    LEVEL_COLORS = {
        "success": "#000000",
        "info": "#888888",
        "warning": "#555555",
        "error": "#000000",
    }

class UIStyles:
    """UI 样式配置"""
    FONT_FAMILY = "Microsoft YaHei UI"

    @staticmethod
    def apply_global_styles():
        ctk.set_appearance_mode("light")
        ctk.set_default_color_theme("blue")
