from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Optional

from parse import parse

from gradle_docs.common.errors import InvalidVersionError
from gradle_docs.common.logging import get_logger

DEFAULT_GRADLE_VERSION = "8.5"
VERSION_ENV_VAR = "GRADLE_DOCS_VERSION"

PATTERN = "{base}-{qualifier}"
BASE_VERSION = re.compile(r"^(\d+)\.(\d+)(?:\.(\d+))?$")
PRE_RELEASE = re.compile(r"^(rc|milestone|preview)-\d+$")
SNAPSHOT = re.compile(r"^\d{14}[+-]\d{4}$")


@dataclass(frozen=True)
class GradleVersion:
    """A Gradle release, release candidate or nightly snapshot version."""

    version: str
    major: int
    minor: int
    patch: int = 0
    qualifier: Optional[str] = None

    @property
    def base_version(self) -> str:
        return self.version.split("-", 1)[0]

    @property
    def is_snapshot(self) -> bool:
        return self.qualifier is not None and SNAPSHOT.match(self.qualifier) is not None

    def __str__(self) -> str:
        return self.version

    @classmethod
    def parse(cls, text: str) -> GradleVersion:
        """
        Parse a version string such as '8.5', '8.5-rc-1' or '8.6-20231201000000+0000'.

        Raises:
            InvalidVersionError: if the text is not a recognised version
        """
        if not isinstance(text, str):
            raise InvalidVersionError(f"Version must be a string, got {type(text).__name__}")
        version = text.strip()

        m = parse(PATTERN, version)
        base, qualifier = (m["base"], m["qualifier"]) if m else (version, None)

        numbers = BASE_VERSION.match(base)
        if not numbers:
            raise InvalidVersionError(f"Not a valid Gradle version: {text!r}")
        if qualifier is not None and not (PRE_RELEASE.match(qualifier) or SNAPSHOT.match(qualifier)):
            raise InvalidVersionError(f"Unknown qualifier {qualifier!r} in Gradle version {text!r}")

        major, minor, patch = numbers.groups()
        return cls(
            version=version,
            major=int(major),
            minor=int(minor),
            patch=int(patch) if patch else 0,
            qualifier=qualifier,
        )

    @classmethod
    def current(cls) -> GradleVersion:
        """Return the version from the environment, falling back to the packaged default."""
        logger = get_logger("version")
        value = os.environ.get(VERSION_ENV_VAR, "").strip()
        if value:
            logger.debug(f"Using Gradle version {value} from {VERSION_ENV_VAR}")
            return cls.parse(value)
        logger.debug(f"Using default Gradle version {DEFAULT_GRADLE_VERSION}")
        return cls.parse(DEFAULT_GRADLE_VERSION)
