
import PyInstaller.__main__
import os

print("🚀 开始构建 CommandBoard.exe ...")

# 1. 配置参数
params = [
    'main.py',
    '--name=CommandBoard',
    '--onefile',
    '--noconsole',
    f'--add-data=command_board{os.pathsep}command_board',  # 包含完整源码
    '--collect-all=customtkinter',          # 收集 ctk 资源
    '--hidden-import=PIL._tkinter_finder',
    '--clean',
    '--distpath=dist',
    '--workpath=build',
    '--specpath=.',
    '--noconfirm',
]

# 2. 执行构建
PyInstaller.__main__.run(params)

print("✅ 构建完成！文件位于 dist/CommandBoard")
