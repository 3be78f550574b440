"""
BackupEntry 单元测试
"""

from datetime import datetime
from pathlib import Path

from command_board.domain.entities import BackupEntry


def test_name_and_modified_at():
    stamp = datetime(2026, 10, 19, 9, 30, 15)
    entry = BackupEntry(
        path=Path('/data/backups/tasks_backup_20261019_093015.json'),
        modified_ns=int(stamp.timestamp()) * 1_000_000_000,
    )

    assert entry.name == 'tasks_backup_20261019_093015.json'
    assert entry.modified_at == stamp


def test_sort_key_orders_by_mtime_then_name():
    older = BackupEntry(Path('tasks_backup_b.json'), 100)
    newer = BackupEntry(Path('tasks_backup_a.json'), 200)
    tied = BackupEntry(Path('tasks_backup_c.json'), 200)

    ordered = sorted([older, newer, tied], key=BackupEntry.sort_key, reverse=True)

    assert [e.name for e in ordered] == [
        'tasks_backup_c.json', 'tasks_backup_a.json', 'tasks_backup_b.json'
    ]


def test_same_second_sequence_compares_numerically():
    names = ['tasks_backup_20261019_090000'] + [
        f'tasks_backup_20261019_090000_{i}' for i in (1, 2, 9, 10, 11)
    ]
    entries = [BackupEntry(Path(f'{n}.json'), 500) for n in names]

    ordered = sorted(entries, key=BackupEntry.sort_key, reverse=True)

    assert [e.path.stem.rsplit('_', 1)[-1] for e in ordered] == [
        '11', '10', '9', '2', '1', '090000'
    ]


def test_later_stamp_beats_higher_sequence_at_equal_mtime():
    earlier = BackupEntry(Path('tasks_backup_20261019_090000_12.json'), 500)
    later = BackupEntry(Path('tasks_backup_20261019_090001.json'), 500)

    assert later.sort_key() > earlier.sort_key()
