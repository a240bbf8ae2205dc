from topicmsg.core.models.message import Message


def make_message(topic: str | None = "SomeTopic", **params) -> Message:
    msg = Message(topic)
    for key, value in params.items():
        msg.add_param(key, value)
    return msg
