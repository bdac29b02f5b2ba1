"""GitHub Actions entry point: resolve the tag format and publish the next version.

Inputs are read from the ``INPUT_*`` environment variables the Actions runner sets
and can be overridden on the command line::

    INPUT_TAG-FORMAT='${year}.${month}.${rev}' python -m next_version_tag
    next-version-tag --tag-format 'app-v${rev}' --release-candidate

The version is printed on stdout and written as ``version`` to ``GITHUB_OUTPUT``.
"""

from __future__ import annotations

import argparse
import datetime
import json
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, List, Mapping, Optional, Sequence

from .git import git_tags
from .tag_format import Clock, resolve_tag_format, tag_filter_pattern
from .versioning import get_next_version

logger = logging.getLogger(__name__)

OUTPUT_NAME = "version"

TagSource = Callable[..., List[str]]


class ActionError(Exception):
    """Raised when the action inputs cannot be used."""


def _input(environ: Mapping[str, str], name: str) -> str:
    # The runner keeps dashes in input names; accept the underscore form too.
    key = f"INPUT_{name.upper()}"
    value = environ.get(key)
    if value is None:
        value = environ.get(key.replace("-", "_"), "")
    return value.strip()


def _is_true(value: str) -> bool:
    return value.strip().lower() == "true"


@dataclass
class ActionInputs:
    tag_format: str
    version_file: Optional[str] = None
    release_candidate: bool = False
    fetch: bool = True
    repo_dir: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> "ActionInputs":
        """Build inputs from the ``INPUT_*`` variables set by the runner."""
        return cls(
            tag_format=_input(environ, "tag-format"),
            version_file=_input(environ, "version-file") or None,
            release_candidate=_is_true(_input(environ, "release-candidate")),
        )


def parse_args(
    argv: Optional[Sequence[str]] = None, environ: Mapping[str, str] = os.environ
) -> ActionInputs:
    """Parse command line flags, defaulting to the runner's inputs."""
    defaults = ActionInputs.from_env(environ)
    parser = argparse.ArgumentParser(
        prog="next-version-tag",
        description="Determine the next version tag from existing git tags.",
    )
    parser.add_argument(
        "--tag-format",
        default=defaults.tag_format or None,
        required=not defaults.tag_format,
        help="template with ${year}, ${month} and ${rev} placeholders",
    )
    parser.add_argument(
        "--version-file",
        default=defaults.version_file,
        help="JSON file with year/month overrides",
    )
    parser.add_argument(
        "--release-candidate",
        action="store_true",
        default=defaults.release_candidate,
        help="append the next -rcN suffix",
    )
    parser.add_argument(
        "--no-fetch",
        dest="fetch",
        action="store_false",
        help="skip 'git fetch --tags' before listing tags",
    )
    parser.add_argument("--repo-dir", default=None, help="repository to read tags from")
    args = parser.parse_args(argv)
    return ActionInputs(
        tag_format=args.tag_format,
        version_file=args.version_file,
        release_candidate=args.release_candidate,
        fetch=args.fetch,
        repo_dir=args.repo_dir,
    )


def read_version_file(path: Optional[str]) -> Any:
    """Load the year/month override, or ``None`` when there is no such file."""
    if not path or not os.path.exists(path):
        return None
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except ValueError as exc:
        raise ActionError(f"Invalid JSON in version file {path}: {exc}") from exc
    logger.info("Version file content: %s", json.dumps(data))
    return data


def write_output(name: str, value: str, environ: Mapping[str, str] = os.environ) -> None:
    """Append ``name=value`` to ``GITHUB_OUTPUT`` if present."""
    output_path = environ.get("GITHUB_OUTPUT")
    if not output_path:
        return
    with open(output_path, "a", encoding="utf-8") as fh:
        fh.write(f"{name}={value}\n")


def run(
    inputs: ActionInputs,
    tag_source: Optional[TagSource] = None,
    clock: Clock = datetime.date.today,
    environ: Mapping[str, str] = os.environ,
) -> str:
    """Compute the next version for ``inputs`` and publish it as a step output."""
    tag_source = tag_source or git_tags
    if not inputs.tag_format:
        raise ActionError("Input required and not supplied: tag-format")
    logger.info("Tag format: %s", inputs.tag_format)

    version_override = read_version_file(inputs.version_file)
    resolved = resolve_tag_format(inputs.tag_format, version_override, clock=clock)

    pattern = tag_filter_pattern(resolved)
    logger.info("Regex pattern: %s", pattern)

    tags = tag_source(pattern, repo_dir=inputs.repo_dir, fetch=inputs.fetch)
    logger.info("Tags: %s", ", ".join(tags))

    next_version = get_next_version(tags, resolved, inputs.release_candidate)
    logger.info("Next version: %s", next_version)

    write_output(OUTPUT_NAME, next_version, environ)
    return next_version


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(
        level=logging.DEBUG if os.environ.get("RUNNER_DEBUG") == "1" else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        version = run(parse_args(argv))
    except Exception as exc:
        logger.debug("Action failed", exc_info=True)
        print(f"::error::{exc}", file=sys.stderr)
        return 1
    print(version)
    return 0
