"""List the repository's git tags."""

from __future__ import annotations

import logging
import re
import subprocess
from typing import List, Optional

logger = logging.getLogger(__name__)


def fetch_tags(repo_dir: Optional[str] = None) -> None:
    """Fetch all tags from the remote so the local tag list is current."""
    subprocess.run(
        ["git", "fetch", "--tags"],
        cwd=repo_dir,
        check=True,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.PIPE,
        text=True,
    )


def list_tags(pattern: Optional[str] = None, repo_dir: Optional[str] = None) -> List[str]:
    """Return local tags, keeping only those ``pattern`` finds a match in."""
    output = subprocess.check_output(["git", "tag"], cwd=repo_dir, text=True)
    tags = [line for line in output.splitlines() if line]
    if not pattern:
        return tags
    regex = re.compile(pattern, re.ASCII)
    return [tag for tag in tags if regex.search(tag)]


def git_tags(
    pattern: Optional[str] = None,
    repo_dir: Optional[str] = None,
    fetch: bool = True,
) -> List[str]:
    """Fetch and list tags; git failures yield an empty list."""
    try:
        if fetch:
            fetch_tags(repo_dir)
        return list_tags(pattern, repo_dir)
    except subprocess.CalledProcessError as exc:
        logger.warning(
            "Failed to fetch or filter tags: %s %s", exc, (exc.stderr or "").strip()
        )
        return []
    except FileNotFoundError as exc:
        logger.warning("Failed to fetch or filter tags: %s", exc)
        return []
