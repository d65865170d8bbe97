"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Raised when a setting holds a value verdict cannot work with."""

    def __init__(self, setting: str, value: object):
        self.setting = setting
        self.value = value
        super().__init__(f"Unsupported value for {setting}: {value!r}")


class DependencyInjectionError(UtilError):
    """Raised when no provider implements a mockable component."""

    def __init__(self, component: str, mock: bool):
        self.component = component
        self.mock = mock
        kind = "mock" if mock else "production"
        super().__init__(f"No {kind} implementation for {component}")
