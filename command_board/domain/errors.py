"""
存储异常 - 领域层

持久化核心向调用方抛出的所有错误都派生自 StorageError，
异常消息 (str(exc)) 即为直接展示给用户的错误描述。
"""


class StorageError(Exception):
    """持久化错误基类"""


class AppDataRootError(StorageError):
    """无法获取平台应用数据目录（启动时致命错误）"""


class StorageIOError(StorageError):
    """读取、写入或复制文件失败"""


class BackupError(StorageIOError):
    """保存前的备份复制失败，本次保存被中止"""


class CorruptDataError(StorageError):
    """数据文件无法解析为任务文档"""


class SerializationError(StorageError):
    """任务文档无法编码为 JSON"""


class NoDataToExportError(StorageError):
    """导出时数据文件不存在"""


class BackupNotFoundError(StorageError):
    """请求的备份不在备份集中"""
