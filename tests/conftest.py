"""
Pytest 配置文件

提供测试所需的 fixtures 和共享配置。
所有存储相关 fixture 都指向 tmp_path 下的临时应用数据目录。
"""

import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest

# 确保项目根目录在 Python 路径中
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


# ============================================================
# Clock
# ============================================================

class StepClock:
    """每次调用前进固定秒数的假时钟，保证备份文件名各不相同"""

    def __init__(self, start: datetime = datetime(2026, 10, 19, 9, 0, 0), step_seconds: int = 1):
        self.current = start
        self.step = timedelta(seconds=step_seconds)

    def __call__(self) -> datetime:
        now = self.current
        self.current += self.step
        return now


@pytest.fixture
def clock():
    return StepClock()


# ============================================================
# Storage Fixtures
# ============================================================

@pytest.fixture
def app_data_root(tmp_path):
    """临时应用数据目录（尚未创建）"""
    return tmp_path / "appdata"


@pytest.fixture
def resolver(app_data_root):
    from command_board.infrastructure.persistence import PathResolver
    return PathResolver(app_data_root)


@pytest.fixture
def rotator(resolver, clock):
    from command_board.infrastructure.persistence import BackupRotator
    return BackupRotator(resolver, clock=clock)


@pytest.fixture
def store(resolver, rotator):
    from command_board.infrastructure.persistence import DocumentStore
    return DocumentStore(resolver, rotator)


@pytest.fixture
def service(store):
    from command_board.application.services import TaskDataService
    return TaskDataService(store)


@pytest.fixture
def sample_document():
    """包含嵌套任务记录的文档样本"""
    from command_board.domain.entities import TaskDocument
    return TaskDocument(
        tasks=[
            {
                'id': 'a1b2',
                'title': '准备周会材料',
                'type': 'recurring',
                'priority': 'p1',
                'status': 'in-progress',
                'createdAt': '2026-10-12T08:30:00.000Z',
                'recurrence': {'pattern': 'weekly', 'weekdays': [1]},
                'sortOrder': 0,
                'estimatedMinutes': 45,
            },
            {
                'id': 'c3d4',
                'title': 'Review budget',
                'type': 'one-off',
                'priority': 'p2',
                'status': 'blocked',
                'blockerReason': None,
                'sortOrder': 1,
            },
        ],
        labels=['工作', 'finance'],
        stakeholders=['Alex', 'Sam'],
    )


def make_document(index: int):
    """按序号生成可区分的文档"""
    from command_board.domain.entities import TaskDocument
    return TaskDocument(
        tasks=[{'id': f'task-{index}', 'title': f'Task {index}'}],
        labels=[f'label-{index}'],
        stakeholders=[],
    )


@pytest.fixture
def document_factory():
    return make_document


# ============================================================
# Config
# ============================================================

@pytest.fixture
def restore_config():
    """测试结束后恢复全局配置实例"""
    from command_board import config
    saved = (config.storage_config, config.logging_config)
    yield config
    config.storage_config, config.logging_config = saved
