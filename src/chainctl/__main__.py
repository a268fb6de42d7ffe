"""Allow ``python -m chainctl``."""

from chainctl.cli import cli

if __name__ == "__main__":
    cli()
