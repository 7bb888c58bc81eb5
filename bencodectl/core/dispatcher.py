import argparse
import functools
from typing import Protocol

from bencodec.bootstrap.config.settings import BencodecConfig
from bencodectl.core.model import Outcome


class CommandHandler(Protocol):
    def __call__(
        self,
        config: BencodecConfig,
        namespace: argparse.Namespace,
    ) -> Outcome:
        ...


class CommandDispatcher:
    def __init__(self) -> None:
        self._commands: dict[tuple[str, ...], CommandHandler] = {}

    def dispatch(
        self,
        *arguments: str,
        config: BencodecConfig,
        namespace: argparse.Namespace
    ) -> Outcome:
        command = self._commands.get(arguments)
        if command is None:
            raise RuntimeError(f"Unknown '{' '.join(arguments)}' Command")
        return command(config, namespace)

    def command(self, *arguments: str):
        def decorator(func: CommandHandler):
            if arguments in self._commands:
                raise RuntimeError(f"Command '{' '.join(arguments)}' is already registered")

            @functools.wraps(func)
            def wrapper(
                config: BencodecConfig,
                namespace: argparse.Namespace,
            ) -> Outcome:
                return func(config, namespace)

            self._commands[arguments] = wrapper

            return wrapper

        return decorator

    def commands(self) -> list[tuple[str, ...]]:
        return list(self._commands)
