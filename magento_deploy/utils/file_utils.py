# magento_deploy/utils/file_utils.py
"""File operation utilities"""

import os
import shutil
import tempfile
from pathlib import Path
from typing import Union


def atomic_write(file_path: Path,
                 content: Union[str, bytes],
                 mode: str = 'w') -> None:
    """
    Write file atomically

    Args:
        file_path: Target file path
        content: Content to write
        mode: Write mode
    """
    temp_fd, temp_path = tempfile.mkstemp(dir=file_path.parent)

    try:
        with os.fdopen(temp_fd, mode) as f:
            f.write(content)

        os.replace(temp_path, file_path)

    except Exception:
        if os.path.exists(temp_path):
            os.unlink(temp_path)
        raise


def remove_path(path: Path) -> bool:
    """
    Remove a file, symlink or directory tree

    Symlinks are unlinked, never followed.

    Args:
        path: Path to remove

    Returns:
        True if something was removed
    """
    if path.is_symlink() or path.is_file():
        path.unlink()
        return True
    if path.is_dir():
        shutil.rmtree(path)
        return True
    return False


def copy_path(src: Path, dst: Path) -> None:
    """
    Copy a file or directory tree, overwriting files at the destination

    Args:
        src: Source file or directory
        dst: Destination path
    """
    if dst.is_symlink():
        dst.unlink()

    if src.is_dir():
        if dst.exists() and not dst.is_dir():
            dst.unlink()
        shutil.copytree(src, dst, symlinks=True, dirs_exist_ok=True)
    else:
        if dst.is_dir():
            shutil.rmtree(dst)
        dst.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src, dst)


def prune_empty_dirs(path: Path, stop_at: Path) -> None:
    """
    Remove empty parent directories of path, up to (not including) stop_at

    Args:
        path: Removed path whose parents are pruned
        stop_at: Directory that is never removed
    """
    stop_at = Path(stop_at)
    current = Path(path).parent
    while current != stop_at and stop_at in current.parents:
        try:
            current.rmdir()
        except OSError:
            break
        current = current.parent
