import pytest
import yaml

from topicmsg.bootstrap import deps
from topicmsg.bootstrap.config.loader import get_configfile
from topicmsg.bootstrap.config.settings import TopicMsgConfig


@pytest.mark.ut
def test_defaults_without_file(clean_config):
    assert get_configfile() is None

    config = TopicMsgConfig()
    assert config.encoder.max_message_size is None
    assert config.logging.level == "INFO"


@pytest.mark.ut
def test_default_file_in_cwd(clean_config):
    file = clean_config / "topicmsg.yaml"
    file.write_text(yaml.safe_dump({"encoder": {"max_message_size": 128}}))

    assert get_configfile() == file
    assert TopicMsgConfig().encoder.max_message_size == 128


@pytest.mark.ut
def test_file_from_env(clean_config, monkeypatch, tmp_path):
    file = tmp_path / "custom.yaml"
    file.write_text(yaml.safe_dump({"logging": {"level": "DEBUG"}}))
    monkeypatch.setenv("TOPICMSGCONFIG", str(file))

    assert TopicMsgConfig().logging.level == "DEBUG"


@pytest.mark.ut
def test_missing_file_from_env(clean_config, monkeypatch, tmp_path):
    monkeypatch.setenv("TOPICMSGCONFIG", str(tmp_path / "nope.yaml"))

    with pytest.raises(SystemExit):
        get_configfile()


@pytest.mark.ut
def test_env_overrides_file(clean_config, monkeypatch):
    file = clean_config / "topicmsg.yaml"
    file.write_text(yaml.safe_dump({"encoder": {"max_message_size": 128}}))
    monkeypatch.setenv("TOPICMSG_ENCODER__MAX_MESSAGE_SIZE", "64")

    assert TopicMsgConfig().encoder.max_message_size == 64


@pytest.mark.ut
def test_get_serializer_uses_config(clean_config, monkeypatch):
    monkeypatch.setenv("TOPICMSG_ENCODER__MAX_MESSAGE_SIZE", "32")

    serializer = deps.get_serializer()
    assert serializer.max_message_size == 32
    assert deps.get_serializer() is serializer


@pytest.mark.ut
def test_invalid_config_exits(clean_config, monkeypatch):
    monkeypatch.setenv("TOPICMSG_ENCODER__MAX_MESSAGE_SIZE", "1")

    with pytest.raises(SystemExit) as exc:
        deps.get_config()

    assert "encoder.max_message_size" in str(exc.value)


@pytest.mark.ut
def test_configure_logging_uses_config_level(clean_config, monkeypatch):
    calls = []
    monkeypatch.setenv("TOPICMSG_LOGGING__LEVEL", "WARNING")
    monkeypatch.setattr(deps, "setup_logging", calls.append)

    deps.configure_logging()

    assert calls == ["WARNING"]
