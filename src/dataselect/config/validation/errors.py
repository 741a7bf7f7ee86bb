"""Config validation errors raised while building SelectionSettings."""
from dataselect.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded; the selection defaults are unusable."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A ``DATASELECT_*`` variable without a default is not set."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Environment variable '{setting_name}' must be set",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but unusable, e.g. a page size below 1.

    ``setting_name`` is the field name for validation failures and the
    environment variable for values that could not be parsed.
    """
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "value": value, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
