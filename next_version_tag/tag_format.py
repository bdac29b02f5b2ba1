"""Resolve tag format templates and derive the patterns used to match tags.

A tag format is a free-form string with up to three placeholders:

* ``${year}``  - four digit year, from the version override or the clock
* ``${month}`` - two digit month, from the version override or the clock
* ``${rev}``   - revision slot, filled in by :func:`next_version_tag.versioning.get_next_version`

Only the first occurrence of each placeholder is substituted.
"""

from __future__ import annotations

import datetime
import re
from typing import Any, Callable, Mapping

YEAR_PLACEHOLDER = "${year}"
MONTH_PLACEHOLDER = "${month}"
REV_PLACEHOLDER = "${rev}"

Clock = Callable[[], datetime.date]


def _render(value: Any) -> str:
    # JSON numbers like 4.0 render as "4".
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def resolve_tag_format(
    tag_format: str,
    version_override: Any = None,
    clock: Clock = datetime.date.today,
) -> str:
    """Replace ``${year}`` and ``${month}``, leaving ``${rev}`` in place."""
    override = version_override if isinstance(version_override, Mapping) else {}
    today = clock()

    year = _render(override.get("year") or today.year)
    month = _render(override.get("month") or today.month).rjust(2, "0")

    return tag_format.replace(YEAR_PLACEHOLDER, year, 1).replace(
        MONTH_PLACEHOLDER, month, 1
    )


def revision_pattern(tag_format: str) -> re.Pattern[str]:
    """Compile the pattern that captures the revision number of a tag.

    Dots are escaped and the first ``${rev}`` becomes ``(\\d+)``. The pattern is
    anchored at the very end only (no trailing newline) and
    matches ASCII digits only, so it is meant to be used with ``search``.
    """
    escaped = tag_format.replace(REV_PLACEHOLDER, r"(\d+)", 1).replace(".", r"\.")
    return re.compile(f"{escaped}\\Z", re.ASCII)


def tag_filter_pattern(tag_format: str) -> str:
    """Return the loose pattern used to pre-filter tags listed from git."""
    return tag_format.replace(REV_PLACEHOLDER, r"\d+", 1)
