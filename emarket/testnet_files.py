"""File helpers for laying out multi-node testnet directories."""

from __future__ import annotations

import os
import shutil
from collections.abc import Sequence
from pathlib import Path

BASE_P2P_PORT = 26656
PORT_STEP = 3
DIR_MODE = 0o755
FILE_MODE = 0o644


def is_sub_dir(src: str | os.PathLike[str], dst_dir: str | os.PathLike[str]) -> bool:
    """Return True when src lies inside dst_dir (or is dst_dir itself)."""
    abs_src = os.path.abspath(src)
    abs_dst = os.path.abspath(dst_dir)
    relative = os.path.relpath(abs_src, abs_dst)
    return not relative.startswith("..") and not os.path.isabs(relative)


def copy_file(src: str | os.PathLike[str], dst_dir: str | os.PathLike[str]) -> int:
    """Copy src into dst_dir under its own file name; return the number of bytes copied."""
    destination = Path(dst_dir) / Path(src).name
    with open(src, "rb") as source, open(destination, "wb") as target:
        shutil.copyfileobj(source, target)
        copied = target.tell()
        target.flush()
        os.fsync(target.fileno())
    return copied


def write_file(
    path: str | os.PathLike[str], directory: str | os.PathLike[str], contents: bytes
) -> None:
    """Create directory if needed, then write contents to path."""
    try:
        os.makedirs(directory, mode=DIR_MODE, exist_ok=True)
    except OSError as exc:
        raise OSError(f"could not create directory {str(directory)!r}: {exc}") from exc
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
    with os.fdopen(fd, "wb") as handle:
        handle.write(contents)


def node_dir_name(prefix: str, index: int) -> str:
    """Return the directory name of the node with the given index."""
    return f"{prefix}{index}"


def persistent_peers(node_ids: Sequence[str], starting_ip_address: str) -> str:
    """Return the comma-separated peer list id@ip:port, ports descending from 26656."""
    return ",".join(
        f"{node_id}@{starting_ip_address}:{BASE_P2P_PORT - PORT_STEP * i}"
        for i, node_id in enumerate(node_ids)
    )