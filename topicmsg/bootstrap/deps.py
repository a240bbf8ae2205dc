import json
from functools import lru_cache

from pydantic import ValidationError

from topicmsg.bootstrap.config.settings import TopicMsgConfig
from topicmsg.core.helpers.utils import setup_logging
from topicmsg.infra.wire_serializer import WireSerializer


@lru_cache
def get_config() -> TopicMsgConfig:
    try:
        return TopicMsgConfig()
    except ValidationError as ex:
        msg = ["Configuration validation failed:"]
        errs = json.loads(ex.json())
        for err in errs:
            msg.append(f"  {'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}")
        raise SystemExit("\n".join(msg))


@lru_cache
def get_serializer() -> WireSerializer:
    config = get_config()
    return WireSerializer(max_message_size=config.encoder.max_message_size)


def configure_logging() -> None:
    setup_logging(get_config().logging.level)
