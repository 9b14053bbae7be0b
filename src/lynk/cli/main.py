"""Lynk CLI entry point"""

import click

from .command.init import init
from .command.start import start


@click.group(
    name="lynk",
    help="Lynk - Ephemeral text and file sharing channels",
)
def main():
    """Main CLI entry point"""
    pass


# Register commands
main.add_command(init)
main.add_command(start)


if __name__ == "__main__":
    main()
