"""Code for interacting with Django settings."""

from typing import Optional, cast

from django.conf import settings
from typing_extensions import TypedDict


class PlaygroundBffSettings(TypedDict):
    """Dictionary defining the shape `settings.PLAYGROUND_BFF` should have.

    All settings are optional and have defaults as described in their docstrings and
    defined in `DEFAULT_BFF_SETTINGS`.
    """

    #: Page size used for connections when neither `first` nor `last` is
    #: provided. Can be set to `None` to fall back to `MAX_PAGE_SIZE`.
    DEFAULT_PAGE_SIZE: Optional[int]

    #: The largest value accepted for `first` and `last` on connections.
    MAX_PAGE_SIZE: int


DEFAULT_BFF_SETTINGS = PlaygroundBffSettings(
    DEFAULT_PAGE_SIZE=10,
    MAX_PAGE_SIZE=50,
)


def bff_settings() -> PlaygroundBffSettings:
    """Get playground bff settings.

    Return the dictionary from `settings.PLAYGROUND_BFF`, with defaults
    for missing keys.

    Preferred to direct access for the type hints and defaults.
    """
    defaults = DEFAULT_BFF_SETTINGS
    return cast(
        "PlaygroundBffSettings",
        {**defaults, **getattr(settings, "PLAYGROUND_BFF", {})},
    )
