"""
备份条目数据模型

备份是数据文件在某一时刻的只读副本，时间戳取自文件系统元数据。
"""

import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path


# <前缀><YYYYMMDD_HHMMSS>[_<序号>]
_STAMP_SUFFIX_RE = re.compile(r'^(?P<stamp>.*\d{8}_\d{6})(?:_(?P<seq>\d+))?$')


@dataclass(frozen=True)
class BackupEntry:
    """单个备份文件"""
    path: Path          # 备份文件路径
    modified_ns: int    # 修改时间（纳秒，排序依据）

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def modified_at(self) -> datetime:
        return datetime.fromtimestamp(self.modified_ns / 1_000_000_000)

    def sort_key(self):
        """
        新旧排序键

        修改时间优先；同一时刻按文件名中的时间戳，再按同秒序号（数值比较，_10 晚于 _9）。
        """
        match = _STAMP_SUFFIX_RE.match(self.path.stem)
        if match is None:
            return (self.modified_ns, self.path.stem, 0)
        return (self.modified_ns, match.group('stamp'), int(match.group('seq') or 0))
