import json
from typing import Any

import yaml

from bencodec.bootstrap.config.settings import OutputFormat
from bencodectl.core.ports.render import Renderer


class JsonRenderer(Renderer):
    def __init__(self, indent: int = 2) -> None:
        self._indent = indent

    def render(self, data: Any) -> str:
        return json.dumps(data, indent=self._indent, sort_keys=False, ensure_ascii=False)


class YamlRenderer(Renderer):
    def __init__(self, indent: int = 2) -> None:
        self._indent = indent

    def render(self, data: Any) -> str:
        text = yaml.safe_dump(
            data,
            sort_keys=False,
            indent=self._indent,
            allow_unicode=True
        )
        # Plain scalars are followed by an explicit document end marker
        return text.removesuffix("...\n").rstrip("\n")


def get_renderer(fmt: OutputFormat, indent: int = 2) -> Renderer:
    match fmt:
        case OutputFormat.json:
            return JsonRenderer(indent)
        case OutputFormat.yaml:
            return YamlRenderer(indent)
        case _:
            raise ValueError(f"Unknown output format: {fmt}")
