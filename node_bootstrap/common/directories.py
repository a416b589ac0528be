from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from node_bootstrap.common.constants import CHAINS_DIR, DEFAULT_NETWORK_CONFIG_PATH


@dataclass(frozen=True)
class NodeDirectories:
    base_path: Path
    # <base_path>/chains/<chain_id>; also the database root
    config_dir: Path
    net_config_dir: Path


def derive_directories(
    chain_id: str,
    base_path: Optional[Path],
    default_root: Callable[[], Path],
) -> NodeDirectories:
    """Lays out a node's directories under `base_path`.

    `default_root` is only called when no base path is given, so an explicit base path never
    touches the platform directory service.
    """
    root = Path(base_path) if base_path is not None else default_root()
    config_dir = root / CHAINS_DIR / chain_id
    return NodeDirectories(
        base_path=root,
        config_dir=config_dir,
        net_config_dir=config_dir / DEFAULT_NETWORK_CONFIG_PATH,
    )
