import pytest

from topicmsg.bootstrap import deps
from topicmsg.bootstrap.config import loader
from topicmsg.core.models.message import Message
from topicmsg.infra.wire_serializer import WireSerializer


@pytest.fixture
def message() -> Message:
    return Message()


@pytest.fixture
def serializer() -> WireSerializer:
    return WireSerializer()


@pytest.fixture
def clean_config(monkeypatch, tmp_path):
    """Isolate configuration lookups from the caller's environment."""
    for name in ("TOPICMSGCONFIG", "TOPICMSG_ENCODER__MAX_MESSAGE_SIZE", "TOPICMSG_LOGGING__LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)

    loader.get_configfile.cache_clear()
    deps.get_config.cache_clear()
    deps.get_serializer.cache_clear()
    yield tmp_path
    loader.get_configfile.cache_clear()
    deps.get_config.cache_clear()
    deps.get_serializer.cache_clear()
