"""Deploy strategy that deploys nothing"""

from pathlib import Path
from typing import List, Set

from .base import DeployStrategy
from ..constants import STRATEGY_NONE
from ..core.mapping import Mapping


class NoneStrategy(DeployStrategy):
    """Leave the package where the dependency manager installed it"""

    name = STRATEGY_NONE

    def create(self) -> None:
        pass

    def remove(self) -> None:
        pass

    def deploy_mapping(self, mapping: Mapping, source: Path, target: Path,
                       owned: Set[Path], created: List[Path]) -> None:
        pass
