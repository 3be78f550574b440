# Application Services

"""
应用服务 - 业务用例实现
"""

from .task_data_service import TaskDataService, describe_error

__all__ = [
    'TaskDataService',
    'describe_error',
]
