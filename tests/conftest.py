import pytest

from tests.records import ProcessRow, UserModel


@pytest.fixture
def process_row():
    return ProcessRow(pid=42, name="osqueryd", uptime=1.5, on_disk=True, cmdline="osqueryd --verbose", _handle=7)


@pytest.fixture
def user_model():
    return UserModel(uid=501, username="alice", password_hash="x")
