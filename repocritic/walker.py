from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol

from .errors import TraversalLimitError

logger = logging.getLogger(__name__)

SOURCE_EXTENSIONS = (".tsx", ".jsx", ".ts", ".js")


class ContentsLister(Protocol):
    def list_contents(self, owner: str, repo: str, path: str = "") -> List[Dict[str, Any]]:
        ...


@dataclass
class RepoFile:
    path: str
    download_url: str


def is_source_file(name: str) -> bool:
    return name.endswith(SOURCE_EXTENSIONS)


def collect_source_files(
    lister: ContentsLister,
    owner: str,
    repo: str,
    path: str = "",
    max_depth: Optional[int] = None,
    max_files: Optional[int] = None,
) -> List[RepoFile]:
    """
    Recursively collect front-end source files from a repository.

    Directories are expanded in place, so the result follows listing order.
    Listing errors propagate unchanged. TraversalLimitError is raised when
    the tree is deeper than max_depth or holds more than max_files source
    files; None disables either limit.
    """
    files: List[RepoFile] = []
    _walk(lister, owner, repo, path, 0, max_depth, max_files, files)
    logger.info(f"Collected {len(files)} source files from {owner}/{repo}")
    return files


def _walk(lister, owner, repo, path, depth, max_depth, max_files, files):
    if max_depth is not None and depth > max_depth:
        raise TraversalLimitError(f"Repository tree exceeds maximum depth of {max_depth} at '{path}'")

    for item in lister.list_contents(owner, repo, path):
        kind = item.get("type")
        if kind == "file" and is_source_file(item.get("name", "")):
            if max_files is not None and len(files) >= max_files:
                raise TraversalLimitError(f"Repository has more than {max_files} source files")
            files.append(RepoFile(path=item["path"], download_url=item["download_url"]))
        elif kind == "dir":
            _walk(lister, owner, repo, item["path"], depth + 1, max_depth, max_files, files)
