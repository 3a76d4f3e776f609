"""CLI utility functions"""

from .output import (
    console,
    format_deploy_report,
    format_plan,
    format_packages,
    format_config,
    format_error,
)

__all__ = [
    'console',
    'format_deploy_report',
    'format_plan',
    'format_packages',
    'format_config',
    'format_error',
]
