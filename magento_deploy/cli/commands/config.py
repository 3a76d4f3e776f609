"""Config command implementation"""

import sys

import click

from ..utils.output import format_config, format_error
from ...api.exceptions import MagentoDeployError


@click.command()
@click.pass_context
def config(ctx):
    """Show the effective configuration"""
    try:
        format_config(ctx.obj.config)
    except MagentoDeployError as e:
        format_error(e)
        sys.exit(1)
