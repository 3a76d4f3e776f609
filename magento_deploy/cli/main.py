# magento_deploy/cli/main.py
"""Main CLI entry point for magento-deploy"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional, Dict, Any

import click
from rich.logging import RichHandler

from .commands import config, deploy, packages
from .utils.output import console
from ..constants import APP_NAME, ENV_LOG_LEVEL, LOG_FORMAT
from ..core.manager import DeployManager
from ..core.path_resolver import PathResolver
from ..core.repository import InstalledRepository
from ..models.config import DeployConfig
from ..strategies.factory import StrategyFactory


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = os.environ.get(ENV_LOG_LEVEL, "WARNING").upper()

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ],
        force=True,
    )


class Context:
    """CLI context object with lazy configuration loading

    Configuration, repository and manager are only built when a command
    asks for them.
    """

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path
        self.overrides: Dict[str, Any] = {}
        self.verbose: bool = False
        self.debug: bool = False
        self._config: Optional[DeployConfig] = None
        self._manager: Optional[DeployManager] = None

    @property
    def config(self) -> DeployConfig:
        """Get effective configuration (lazy loading)"""
        if self._config is None:
            self._config = DeployConfig.load(self.config_path, self.overrides)
        return self._config

    @property
    def path_resolver(self) -> PathResolver:
        return PathResolver(self.config)

    @property
    def manager(self) -> DeployManager:
        """Get a deploy manager bound to the configured repository"""
        if self._manager is None:
            resolver = self.path_resolver
            self._manager = DeployManager(
                repository=InstalledRepository(resolver.installed_file),
                factory=StrategyFactory(self.config, path_resolver=resolver),
            )
        return self._manager


@click.group(name=APP_NAME)
@click.option('-c', '--config', 'config_path', type=click.Path(dir_okay=False, path_type=Path),
              help='Config file (default: nearest .magento-deploy.yaml)')
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all output except errors')
@click.pass_context
def cli(ctx, config_path, verbose, debug, quiet):
    """Magento Deploy - deploy Magento packages into the Magento root

    Deploys packages installed by the dependency manager: the core package
    first, then modules, then themes, each with its configured strategy
    (symlink, copy or none).
    """
    if quiet:
        logging.disable(logging.CRITICAL)
    else:
        setup_logging(verbose=verbose, debug=debug)

    ctx.obj = Context(config_path)
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug


# Register commands
cli.add_command(deploy.deploy)
cli.add_command(packages.packages)
cli.add_command(config.config)


def main():
    """Main entry point for the CLI application"""
    try:
        cli(prog_name=APP_NAME)

    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    main()
