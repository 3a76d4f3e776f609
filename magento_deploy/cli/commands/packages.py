"""Packages command implementation"""

import sys

import click

from ..utils.output import format_error, format_packages
from ...api.exceptions import MagentoDeployError


@click.command()
@click.option('--type', 'package_type', help='Only show packages of this type')
@click.pass_context
def packages(ctx, package_type):
    """List installed packages and how they deploy"""
    context = ctx.obj
    try:
        manager = context.manager
        factory = manager.factory
        installed = [
            package for package in manager.repository.get_packages()
            if package_type is None or package.type == package_type
        ]

        strategies = [
            factory.strategy_name_for(package) if factory.supports(package) else None
            for package in installed
        ]
        sources = [str(factory.path_resolver.get_source_dir(package)) for package in installed]
        format_packages(installed, strategies, sources)

    except MagentoDeployError as e:
        format_error(e)
        sys.exit(1)
