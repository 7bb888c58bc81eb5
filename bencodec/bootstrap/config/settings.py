from enum import StrEnum
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict, PydanticBaseSettingsSource, YamlConfigSettingsSource

from bencodec.core.models.config import DecoderConfig, TrailingData


class OutputFormat(StrEnum):
    yaml = "yaml"
    json = "json"


class DecoderSettings(BaseModel):
    max_depth: Annotated[
        int,
        Field(
            description=(
                "Maximum nesting depth of lists and dictionaries.\n"
                "Inputs nested deeper are rejected as invalid grammar.\n"
                "A top-level list or dictionary has depth 1."
            ),
            default=256,
            ge=0
        )
    ]

    trailing: Annotated[
        TrailingData,
        Field(
            description=(
                "Policy for bytes following a complete top-level value.\n"
                "'reject' treats them as invalid grammar, 'ignore' stops after the value."
            ),
            default=TrailingData.reject
        )
    ]


class OutputSettings(BaseModel):
    format: Annotated[
        OutputFormat,
        Field(
            description="Rendering used by 'bencodectl decode'.",
            default=OutputFormat.yaml
        )
    ]

    indent: Annotated[
        int,
        Field(
            description="Indentation width of rendered documents.",
            default=2,
            ge=0
        )
    ]


class BencodecConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BENCODEC_",
        env_nested_delimiter="__",
        extra="ignore"
    )

    decoder: Annotated[
        DecoderSettings,
        Field(
            description=(
                "Decoder configuration.\n"
                "Controls how strictly untrusted input is parsed."
            ),
            default_factory=DecoderSettings
        )
    ]

    output: Annotated[
        OutputSettings,
        Field(
            description="Command-line output configuration.",
            default_factory=OutputSettings
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
        # BENCODEC_* variables override whatever the YAML file provides.
        return env_settings, init_settings

    @classmethod
    def load(cls, configfile: Path | None = None) -> "BencodecConfig":
        if configfile is None:
            return cls()

        data = YamlConfigSettingsSource(cls, yaml_file=configfile)()
        return cls(**data)

    def to_decoder_config(self) -> DecoderConfig:
        return DecoderConfig(
            max_depth=self.decoder.max_depth,
            trailing=self.decoder.trailing
        )
