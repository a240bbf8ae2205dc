from typing import Annotated, Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict, PydanticBaseSettingsSource, YamlConfigSettingsSource

from topicmsg.bootstrap.config.loader import get_configfile


class EncoderSettings(BaseModel):
    max_message_size: Annotated[
        int | None,
        Field(
            description=(
                "Upper bound, in bytes, of a single encoded message.\n"
                "Encoding a larger message fails before anything is written.\n"
                "Leave unset for no limit."
            ),
            default=None
        )
    ]

    @field_validator("max_message_size")
    @classmethod
    def validate_size(cls, v: int | None) -> int | None:
        # The smallest message is a one letter topic: "T\n\n".
        if v is not None and v < 3:
            raise ValueError("max_message_size must be at least 3 bytes")
        return v


class LoggingSettings(BaseModel):
    level: Annotated[
        Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        Field(
            description="Logging verbosity passed to setup_logging.",
            default="INFO"
        )
    ]


class TopicMsgConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TOPICMSG_",
        env_nested_delimiter="__",
        extra="ignore"
    )

    encoder: Annotated[
        EncoderSettings,
        Field(
            description="Wire encoder configuration.",
            default_factory=EncoderSettings
        )
    ]

    logging: Annotated[
        LoggingSettings,
        Field(
            description="Logging configuration.",
            default_factory=LoggingSettings
        )
    ]

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Priority: init > ENV > YAML file
        configfile = get_configfile()
        if configfile is None:
            return init_settings, env_settings
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls, yaml_file=configfile),
        )
