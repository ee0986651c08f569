"""Exception classes for hivemark.

Rendering itself is total over every ``str`` input and never raises.
These exceptions cover the configuration surface around it.
"""

from __future__ import annotations


class HivemarkError(Exception):
    """Base exception for all hivemark errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(HivemarkError):
    """Invalid render configuration value.

    Raised when a RenderConfig is built with a value the renderer
    cannot honour (e.g. a negative tab width).
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize config error.

        Args:
            field: Name of the offending RenderConfig field
            message: Description of the problem
        """
        self.field = field
        super().__init__(f"Config field '{field}': {message}")
