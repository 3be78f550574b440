"""
导出对话框单元测试

文件对话框和消息框均被替换，无需显示环境。
"""

from datetime import datetime

import pytest

pytest.importorskip("customtkinter")

from command_board.ui.dialogs import export_dialog
from command_board.ui.dialogs import default_export_name, export_with_dialog


@pytest.fixture
def dialogs(monkeypatch):
    """记录消息框调用，并允许设置文件对话框返回值"""
    calls = {'asked': [], 'info': [], 'error': [], 'answer': ''}

    def fake_ask(**kwargs):
        calls['asked'].append(kwargs)
        return calls['answer']

    monkeypatch.setattr(export_dialog.ctk.filedialog, 'asksaveasfilename', fake_ask)
    monkeypatch.setattr(export_dialog.messagebox, 'showinfo',
                        lambda title, message, **kw: calls['info'].append(message))
    monkeypatch.setattr(export_dialog.messagebox, 'showerror',
                        lambda title, message, **kw: calls['error'].append(message))
    return calls


def test_default_export_name():
    assert default_export_name(datetime(2026, 10, 19, 9, 5, 7)) == 'tasks_export_20261019_090507.json'


def test_cancelled_dialog_does_nothing(service, dialogs):
    dialogs['answer'] = ''

    assert export_with_dialog(service) is None
    assert dialogs['info'] == [] and dialogs['error'] == []


def test_suggests_timestamped_name(service, dialogs, clock):
    export_with_dialog(service, clock=clock)

    assert dialogs['asked'][0]['initialfile'] == 'tasks_export_20261019_090000.json'


def test_successful_export(service, sample_document, dialogs, tmp_path):
    service.save_tasks(sample_document.to_dict())
    destination = tmp_path / 'chosen.json'
    dialogs['answer'] = str(destination)

    result = export_with_dialog(service)

    assert result == str(destination)
    assert destination.exists()
    assert len(dialogs['info']) == 1


def test_missing_data_shows_error(service, dialogs, tmp_path):
    destination = tmp_path / 'chosen.json'
    dialogs['answer'] = str(destination)

    assert export_with_dialog(service) is None
    assert dialogs['error'] == ['没有可导出的数据文件']
    assert not destination.exists()
