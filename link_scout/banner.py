"""Startup banner printed by the CLI."""
from __future__ import annotations

import click

from link_scout import __version__
from link_scout.logger import logger

BANNER = r"""
    __    _       __   _____                  __
   / /   (_)___  / /__/ ___/_________  __  __/ /_
  / /   / / __ \/ //_/\__ \/ ___/ __ \/ / / / __/
 / /___/ / / / / ,<  ___/ / /__/ /_/ / /_/ / /_
/_____/_/_/ /_/_/|_|/____/\___/\____/\__,_/\__/   v{version}
"""


def show_banner() -> None:
    """Print the banner and usage disclaimer to stderr."""
    click.secho(BANNER.format(version=__version__), fg="cyan", err=True)
    logger.info("Use with caution. You are responsible for your actions")
    logger.info("Developers assume no liability and are not responsible for any misuse or damage.")
