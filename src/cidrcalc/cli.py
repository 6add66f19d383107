"""
cidrcalc command-line entry point.
"""

import logging

import click

from cidrcalc import __version__
from cidrcalc.config import get_config
from cidrcalc.logging_config import configure_logging
from cidrcalc.subnet.cli import subnet

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(__version__, prog_name="cidrcalc")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--log-file", type=click.Path(dir_okay=False), help="Also write logs to this file")
def main(debug: bool, log_file: str | None):
    """IPv4 CIDR subnet calculator."""
    config = get_config()
    configure_logging(
        debug=debug,
        level=config.log_level,
        log_file=log_file or config.log_file or None,
    )
    logger.debug("cidrcalc %s starting", __version__)


main.add_command(subnet)


if __name__ == "__main__":
    main()
