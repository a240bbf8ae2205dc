import os
from functools import lru_cache
from pathlib import Path


@lru_cache
def get_configfile() -> Path | None:
    """
    Locate the optional YAML configuration file.

    Priority: ENV > default file in current working directory.
    No file at all is fine, defaults and TOPICMSG_* variables apply.
    """
    raw = os.getenv("TOPICMSGCONFIG")

    if raw is None:
        file = Path.cwd() / "topicmsg.yaml"
        return file if file.is_file() else None

    file = Path(raw)
    if not file.is_file():
        raise SystemExit(
            f"[config] Configuration file not found: '{file}'.\n"
            "  - Fix or unset the TOPICMSGCONFIG environment variable\n"
            "  - Or place a 'topicmsg.yaml' file in the current working directory."
        )

    return file
