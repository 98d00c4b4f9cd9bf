"""Config validation errors – raised while loading settings at startup."""
from mp_payhooks.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded; the service must not start accepting webhooks."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required variable such as ``PAYHOOKS_HMAC_KEY`` is not set.

    ``setting_name`` is the environment variable that was looked up.
    """
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Environment variable '{setting_name}' is required but not set",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but unusable (blank header name, non-numeric int, ...).

    The rejected value is kept on the instance but left out of the message
    and ``detail``, since settings may hold secrets.
    """
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' is invalid: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
