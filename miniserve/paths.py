import os
from enum import Enum
from pathlib import Path

from miniserve.errors import ConfigurationError, ForbiddenError


class PathKind(Enum):
    SINGLE_FILE = "file"
    DIRECTORY = "directory"


def classify(root) -> PathKind:
    """Tell whether the served root is a single file or a directory"""
    root = Path(root)
    if root.is_file():
        return PathKind.SINGLE_FILE
    if root.is_dir():
        return PathKind.DIRECTORY
    raise ConfigurationError(f"{root} is neither a regular file nor a directory")


def resolve_under_root(root: Path, subpath: str) -> Path:
    """Resolve a URL sub-path against `root`, refusing anything that lands
    outside of it.

    `root` must already be canonical. Symlinks are followed, so a link
    pointing out of the tree is refused as well.
    """
    # Backslashes are separators on Windows and must not sneak past the check
    parts = subpath.replace("\\", "/").split("/")
    candidate = root.joinpath(*[p for p in parts if p not in ("", ".")])
    resolved = Path(os.path.realpath(candidate))
    if resolved != root and root not in resolved.parents:
        raise ForbiddenError()
    return resolved
