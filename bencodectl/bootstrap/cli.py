import sys

from bencodectl.bootstrap.deps import get_cli
from bencodec.core.helpers.utils import scan


@scan("bencodectl.bootstrap.commands")
def main() -> None:
    cli = get_cli()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
