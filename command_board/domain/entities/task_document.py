"""
任务文档数据模型

磁盘上唯一持久化的实体: tasks / labels / stakeholders 三元组。
tasks 的元素是任意 JSON 值，其结构由上层业务决定，存储层不做校验。
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from command_board.domain.errors import CorruptDataError


DOCUMENT_KEYS = ('tasks', 'labels', 'stakeholders')


@dataclass
class TaskDocument:
    """任务文档（每次保存整体替换）"""
    tasks: List[Any] = field(default_factory=list)          # 任务记录（透传 JSON）
    labels: List[str] = field(default_factory=list)         # 标签
    stakeholders: List[str] = field(default_factory=list)   # 相关人

    @classmethod
    def empty(cls) -> 'TaskDocument':
        """首次运行时的空文档"""
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'tasks': list(self.tasks),
            'labels': list(self.labels),
            'stakeholders': list(self.stakeholders),
        }

    @classmethod
    def from_dict(cls, data: Any) -> 'TaskDocument':
        """
        从已解析的 JSON 构造文档

        缺失字段视为数据损坏，而不是补默认值，避免静默丢失数据。

        Raises:
            CorruptDataError: 结构不符合任务文档格式
        """
        if not isinstance(data, dict):
            raise CorruptDataError(
                f"任务数据格式错误: 顶层应为对象，实际为 {type(data).__name__}"
            )

        missing = [key for key in DOCUMENT_KEYS if key not in data]
        if missing:
            raise CorruptDataError(f"任务数据缺少字段: {', '.join(missing)}")

        tasks = data['tasks']
        if not isinstance(tasks, list):
            raise CorruptDataError("任务数据格式错误: tasks 应为数组")

        return cls(
            tasks=list(tasks),
            labels=_string_list(data['labels'], 'labels'),
            stakeholders=_string_list(data['stakeholders'], 'stakeholders'),
        )


def _string_list(value: Any, key: str) -> List[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise CorruptDataError(f"任务数据格式错误: {key} 应为字符串数组")
    return list(value)
