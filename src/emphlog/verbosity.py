# topmark:header:start
#
#   project      : EmphLog
#   file         : verbosity.py
#   file_relpath : src/emphlog/verbosity.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Verbosity groups for categorized verbose output.

A verbosity specification is a single string:

- ``None``, ``""``, ``"true"`` or ``"all"`` enable every group;
- ``"false"`` disables every group;
- otherwise a comma-separated list of group names (see `VerboseCategory`).

An invalid group name fails closed: one warning is emitted per unknown name
and *no* group is enabled, so a typo never turns on more output than asked.
A list naming no group at all (``","``, blanks only) is reported once and
enables nothing as well.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from emphlog.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from emphlog.config.logging import EmphlogLogger

logger: EmphlogLogger = get_logger(__name__)


class VerboseCategory(str, Enum):
    """Known verbosity groups."""

    BUILD = "build"
    API = "api"

    @classmethod
    def from_name(cls, name: str) -> VerboseCategory | None:
        """Return the category for ``name`` (case-insensitive), or None."""
        key = name.strip().lower()
        for member in cls:
            if member.value == key:
                return member
        return None


class VerbosityMode(str, Enum):
    """Shape of a parsed verbosity specification."""

    ALL_ENABLED = "all"
    ALL_DISABLED = "none"
    CATEGORIES = "categories"


@dataclass(frozen=True)
class VerbosityConfig:
    """Immutable result of `parse_verbosity`.

    Attributes:
        mode (VerbosityMode): Whether all, none, or selected groups are enabled.
        categories (frozenset[VerboseCategory]): Enabled groups in ``CATEGORIES`` mode.
    """

    mode: VerbosityMode
    categories: frozenset[VerboseCategory] = field(default_factory=frozenset)

    @classmethod
    def all_enabled(cls) -> VerbosityConfig:
        return cls(VerbosityMode.ALL_ENABLED)

    @classmethod
    def all_disabled(cls) -> VerbosityConfig:
        return cls(VerbosityMode.ALL_DISABLED)


def unknown_group_message(token: str) -> str:
    """Return the warning emitted for an unknown verbosity group."""
    return f"Unknown verbosity group {token}. Ignoring..."


EMPTY_GROUPS_MESSAGE = "No verbosity group given. Verbose output is disabled."


def parse_verbosity(
    raw: str | None,
    *,
    warn: Callable[[str], None] | None = None,
) -> VerbosityConfig:
    """Parse a verbosity specification.

    Args:
        raw (str | None): The specification string.
        warn (Callable[[str], None] | None): Receives one message per unknown
            group name, or one for an empty group list. When None, the
            messages go to the internal logger.

    Returns:
        VerbosityConfig: The parsed configuration.
    """
    if raw is None or raw == "":
        return VerbosityConfig.all_enabled()

    key = raw.strip().lower()
    if key in ("true", "all"):
        return VerbosityConfig.all_enabled()
    if key == "false":
        return VerbosityConfig.all_disabled()

    selected: set[VerboseCategory] = set()
    invalid: list[str] = []
    for token in (part.strip() for part in raw.split(",")):
        if not token:
            continue
        category = VerboseCategory.from_name(token)
        if category is None:
            invalid.append(token)
        else:
            selected.add(category)

    messages = [unknown_group_message(token) for token in invalid]
    if not selected and not invalid:
        messages.append(EMPTY_GROUPS_MESSAGE)
    if messages:
        for message in messages:
            if warn is None:
                logger.warning(message)
            else:
                warn(message)
        return VerbosityConfig.all_disabled()

    logger.debug("Verbose output enabled for: %s", ", ".join(sorted(c.value for c in selected)))
    return VerbosityConfig(VerbosityMode.CATEGORIES, frozenset(selected))


def is_enabled(config: VerbosityConfig, category: VerboseCategory | str) -> bool:
    """Return whether verbose output for ``category`` passes ``config``."""
    if config.mode is VerbosityMode.ALL_ENABLED:
        return True
    if config.mode is VerbosityMode.ALL_DISABLED:
        return False
    if not isinstance(category, VerboseCategory):
        resolved = VerboseCategory.from_name(category)
        if resolved is None:
            return False
        category = resolved
    return category in config.categories


def is_any_enabled(config: VerbosityConfig) -> bool:
    """Return whether at least one verbosity group is enabled."""
    if config.mode is VerbosityMode.CATEGORIES:
        return bool(config.categories)
    return config.mode is VerbosityMode.ALL_ENABLED
