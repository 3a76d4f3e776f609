# magento_deploy/cli/commands/deploy.py
"""Deploy command implementation"""

import sys

import click

from ..utils.output import console, format_deploy_report, format_error, format_plan
from ...api.exceptions import MagentoDeployError
from ...constants import EMOJI_WARNING, STRATEGY_COPY, STRATEGY_NONE, STRATEGY_SYMLINK
from ...events import DeployPlugin, EventDispatcher, PackageEvents


@click.command()
@click.option('--root-dir', help='Magento root directory (overrides config)')
@click.option('--strategy', type=click.Choice([STRATEGY_SYMLINK, STRATEGY_COPY, STRATEGY_NONE]),
              help='Default deploy strategy for modules and themes')
@click.option('--force', is_flag=True,
              help='Overwrite content the package did not deploy')
@click.option('--uninstalled', 'uninstalled', multiple=True, metavar='NAME',
              help='Remove a previously deployed package (repeatable)')
@click.option('--prune', is_flag=True,
              help='Remove deployed packages that are no longer installed')
@click.option('--dry-run', is_flag=True, help='Show what would be deployed')
@click.pass_context
def deploy(ctx, root_dir, strategy, force, uninstalled, prune, dry_run):
    """Deploy all installed packages into the Magento root

    The core package is deployed first, then modules, then themes.
    Removals requested with --uninstalled or --prune are applied in the
    same run, using what the previous deploy recorded.

    Examples:

        # Deploy everything listed in vendor/composer/installed.json
        magento-deploy deploy

        # Copy instead of symlink
        magento-deploy deploy --strategy copy

        # Remove a module that was uninstalled
        magento-deploy deploy --uninstalled vendor/old-module
    """
    context = ctx.obj
    context.overrides.update({
        'root_dir': root_dir,
        'deploy_strategy': strategy,
        'force': True if force else None,
    })

    try:
        manager = context.manager
        dispatcher = EventDispatcher()
        plugin = DeployPlugin(manager)
        plugin.activate(dispatcher)

        state = manager.factory.state
        removed = []
        for name in uninstalled:
            recorded = state.get(name)
            if recorded is None:
                console.print(f"[yellow]{EMOJI_WARNING} {name} has no recorded deploy, skipping[/yellow]")
                continue
            removed.append(recorded.package)

        if prune:
            installed = [package.name for package in manager.repository.get_packages()]
            removed.extend(
                recorded.package for recorded in state.missing_from(installed)
                if recorded.name not in uninstalled
            )

        for package in removed:
            dispatcher.dispatch(PackageEvents.POST_PACKAGE_UNINSTALL, package=package)

        if dry_run:
            format_plan(manager.plan())
            return

        dispatcher.dispatch(PackageEvents.POST_INSTALL_CMD)
        format_deploy_report(plugin.last_report)

    except MagentoDeployError as e:
        format_error(e)
        if context.debug:
            console.print_exception()
        sys.exit(1)
