"""Allow ``python -m custom_cli``."""

from custom_cli.cli.app import cli_main

if __name__ == "__main__":
    cli_main()
