"""Enums representing option values."""

import enum
import itertools
from collections.abc import Iterable
from typing import Any

from pygments import styles


def get_all_available_themes() -> Iterable[str]:
    """Return the available theme names."""
    theme_alias: Iterable[str] = ["light", "dark"]
    available_themes = itertools.chain(styles.get_all_styles(), theme_alias)
    yield from available_themes


class _ThemeEnum(str, enum.Enum):
    """Enum version of available pygment themes."""


ThemeEnum = _ThemeEnum(  # type: ignore[call-overload]
    "ThemeEnum",
    {theme.upper(): theme for theme in get_all_available_themes()},
)


class LowerNameEnum(enum.Enum):
    """Enum base class that sets value to lowercase version of name."""

    def _generate_next_value_(  # type: ignore[override, misc]
        name: str,  # noqa: B902, N805
        start: int,
        count: int,
        last_values: list[Any],
    ) -> str:
        """Set member's values as their lowercase name."""
        return name.lower()


@enum.unique
class BackendEnum(str, LowerNameEnum):
    """The markdown rendering backends."""

    STANDALONE = enum.auto()
    HOST_DELEGATED = "host-delegated"
