import argparse
import logging
import sys
from collections.abc import Sequence

from bencodec.bootstrap.config.loader import get_configfile
from bencodec.bootstrap.config.settings import BencodecConfig, OutputFormat
from bencodec.core.helpers.utils import setup_logging
from bencodectl.core.dispatcher import CommandDispatcher
from bencodectl.infra.format_renderer import get_renderer


class BencodeCtl:
    """
    Command-line front end: parses arguments, loads the configuration,
    dispatches to the registered command and writes its Outcome.
    """

    def __init__(self) -> None:
        self._argparser = self._argparse()
        self._dispatcher = CommandDispatcher()
        self._logger = logging.getLogger("bencodectl")

    def command(self, *arguments: str):
        return self._dispatcher.command(*arguments)

    def run(self, argv: Sequence[str] | None = None) -> int:
        args = self._argparser.parse_args(argv)
        setup_logging(args.log_level)

        try:
            config = BencodecConfig.load(get_configfile(args.config))
            fmt = OutputFormat(args.format) if args.format else config.output.format
            renderer = get_renderer(fmt, config.output.indent)

            outcome = self._dispatcher.dispatch(
                args.command,
                config=config,
                namespace=args
            )
        except (TypeError, ValueError) as ex:
            self._logger.error(f"'{args.command}' failed: {ex}")
            print(f"error: {type(ex).__name__}: {ex}", file=sys.stderr)
            return 1

        if outcome.payload is not None:
            self._write_payload(outcome.payload, getattr(args, "output", None))

        if outcome.data is not None:
            print(renderer.render(outcome.data))

        return outcome.exit_code

    @staticmethod
    def _write_payload(payload: bytes, output: str | None) -> None:
        if output and output != "-":
            with open(output, "wb") as f:
                f.write(payload)
            return

        sys.stdout.flush()
        sys.stdout.buffer.write(payload)
        sys.stdout.buffer.flush()

    @staticmethod
    def _argparse() -> argparse.ArgumentParser:
        global_opts = argparse.ArgumentParser(
            prog="bencodectl",
            description="Decode, encode and validate canonical bencode."
        )
        global_opts.add_argument(
            "-c", "--config",
            type=str,
            help="Path to a bencodec configuration file"
        )
        global_opts.add_argument(
            "-l", "--log-level",
            type=str,
            default="WARNING",
            choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
            help="Logging verbosity (logs go to stderr)."
        )
        global_opts.add_argument(
            "-f", "--format",
            choices=[f.value for f in OutputFormat],
            help="Override the configured output format."
        )

        sub = global_opts.add_subparsers(dest="command", required=True)

        decode = sub.add_parser("decode", help="Render a bencode file as YAML or JSON.")
        decode.add_argument("file", help="Input file, '-' for stdin.")

        encode = sub.add_parser("encode", help="Encode a YAML or JSON document as bencode.")
        encode.add_argument("file", help="Input file, '-' for stdin.")
        encode.add_argument("-o", "--output", help="Output file, stdout by default.")

        validate = sub.add_parser("validate", help="Check that a file is canonical bencode.")
        validate.add_argument("file", help="Input file, '-' for stdin.")

        return global_opts
