"""Source to target path mappings for deployed packages

A package maps paths inside its source directory onto paths inside the
root directory. Mappings come from, in order of preference:

1. ``extra.map`` in the package metadata, a list of ``[source, target]`` pairs
2. a ``modman`` file at the top of the source directory
3. every top-level entry of the source directory, mapped onto the same name
"""

import logging
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import List

from ..api.exceptions import ConfigError
from ..constants import DEFAULT_MAP_EXCLUDES, MAP_EXTRA_KEY, MODMAN_FILE
from ..models.package import Package

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Mapping:
    """One source path deployed onto one target path, both relative"""
    source: str
    target: str

    def source_path(self, source_dir: Path) -> Path:
        return source_dir / self.source

    def target_path(self, target_dir: Path) -> Path:
        return target_dir / self.target


def load_mappings(package: Package, source_dir: Path) -> List[Mapping]:
    """
    Get the mappings for a package

    Args:
        package: Package descriptor
        source_dir: Directory the package is deployed from

    Returns:
        List of mappings, glob sources expanded
    """
    if MAP_EXTRA_KEY in package.extra:
        raw = _mappings_from_extra(package)
    elif (source_dir / MODMAN_FILE).is_file():
        raw = parse_modman((source_dir / MODMAN_FILE).read_text(encoding='utf-8'))
    else:
        raw = _default_mappings(source_dir)

    mappings = []
    for mapping in raw:
        mappings.extend(_expand(mapping, source_dir))
    return mappings


def parse_modman(content: str) -> List[Mapping]:
    """
    Parse modman file content

    Args:
        content: modman file text

    Returns:
        Mappings in file order
    """
    mappings = []
    for line_no, line in enumerate(content.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        if line.startswith('@'):
            logger.warning(f"Ignoring unsupported modman directive on line {line_no}: {line}")
            continue

        parts = line.split()
        if len(parts) == 1:
            source, target = parts[0], parts[0]
        elif len(parts) == 2:
            source, target = parts
        else:
            raise ConfigError(f"Invalid modman line {line_no}: {line}")

        if target.endswith('/'):
            target = target + PurePosixPath(source.rstrip('/')).name
        mappings.append(_checked(source, target))
    return mappings


def _mappings_from_extra(package: Package) -> List[Mapping]:
    raw = package.extra.get(MAP_EXTRA_KEY) or []
    if not isinstance(raw, list):
        raise ConfigError(f"extra.{MAP_EXTRA_KEY} of {package.name} must be a list")

    mappings = []
    for pair in raw:
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            raise ConfigError(
                f"Invalid mapping in extra.{MAP_EXTRA_KEY} of {package.name}: {pair!r}"
            )
        mappings.append(_checked(str(pair[0]), str(pair[1])))
    return mappings


def _default_mappings(source_dir: Path) -> List[Mapping]:
    if not source_dir.is_dir():
        return []
    return [
        Mapping(entry.name, entry.name)
        for entry in sorted(source_dir.iterdir())
        if entry.name not in DEFAULT_MAP_EXCLUDES
    ]


def _expand(mapping: Mapping, source_dir: Path) -> List[Mapping]:
    if '*' not in mapping.source:
        return [mapping]

    matches = sorted(source_dir.glob(mapping.source))
    target_dir = PurePosixPath(mapping.target)
    if '*' in target_dir.name:
        target_dir = target_dir.parent
    return [
        Mapping(
            match.relative_to(source_dir).as_posix(),
            (target_dir / match.name).as_posix(),
        )
        for match in matches
    ]


def _checked(source: str, target: str) -> Mapping:
    source = source.strip().rstrip('/')
    target = target.strip().rstrip('/')
    for value in (source, target):
        path = PurePosixPath(value)
        if not value or path.is_absolute() or '..' in path.parts:
            raise ConfigError(f"Mapping paths must be relative and stay inside the package/root: {value!r}")
    return Mapping(source, target)
