"""Compute the next revision (and release candidate) tag from existing tags."""

from __future__ import annotations

import re
from typing import Iterable, Sequence

from .tag_format import REV_PLACEHOLDER, revision_pattern

FIRST_REVISION = 1


def _highest_captured(tags: Iterable[str], pattern: re.Pattern[str]) -> int:
    """Return the largest number captured by ``pattern`` across ``tags``, or 0."""
    highest = 0
    if not pattern.groups:
        return highest
    for tag in tags:
        match = pattern.search(tag)
        if not match:
            continue
        highest = max(highest, int(match.group(1), 10))
    return highest


def get_next_version(
    tags: Sequence[str], tag_format: str, release_candidate: bool = False
) -> str:
    """Return the tag following the highest revision found in ``tags``.

    ``tag_format`` must already be resolved (see
    :func:`next_version_tag.tag_format.resolve_tag_format`) and may still hold a
    ``${rev}`` placeholder. With ``release_candidate`` an ``-rcN`` suffix is
    appended, numbered after the highest existing candidate for that tag.
    """
    if not tags:
        next_tag = tag_format.replace(REV_PLACEHOLDER, str(FIRST_REVISION), 1)
        if release_candidate:
            next_tag += "-rc1"
        return next_tag

    # A revision of 0 is indistinguishable from no match at all.
    highest_revision = _highest_captured(tags, revision_pattern(tag_format))
    next_tag = tag_format.replace(REV_PLACEHOLDER, str(highest_revision + 1), 1)

    if not release_candidate:
        return next_tag

    # The tag is not escaped here, so any "." matches any character.
    rc_pattern = re.compile(f"{next_tag}-rc(\\d+)", re.ASCII)
    highest_rc = _highest_captured(tags, rc_pattern)
    return f"{next_tag}-rc{highest_rc + 1}"
