"""Exception hierarchy for chksum.

Every error message includes: what happened, why, and what to do next.

Failures to read a target are *not* modelled here: those surface as plain
``OSError`` from the digest functions and are reported per target.
"""


class ChksumError(Exception):
    """Base class for all chksum errors."""


class UnsupportedAlgorithm(ChksumError):
    """Requested digest algorithm is unknown or not provided by hashlib."""

    def __init__(self, name: str, available: list[str]):
        avail_str = ", ".join(available) if available else "(none)"
        super().__init__(
            f"Digest algorithm '{name}' is not supported by this Python build. "
            f"Available algorithms: {avail_str}."
        )
        self.name = name
        self.available = available


class ConfigError(ChksumError):
    """Configuration is missing or invalid."""

    def __init__(self, detail: str, hint: str = ""):
        msg = f"Configuration error: {detail}."
        if hint:
            msg += f" {hint}"
        super().__init__(msg)
        self.detail = detail
        self.hint = hint


class ConfigMissing(ConfigError):
    """An explicitly requested config file does not exist."""

    def __init__(self, path: str):
        super().__init__(
            f"No config file found at {path}",
            hint=(
                "Check the --config argument or the CHKSUM_CONFIG environment variable, "
                "or unset them to use ~/.chksum/config.yaml."
            ),
        )
        self.path = path


class InvalidConfigValue(ConfigError):
    """A config key holds a value outside its allowed set."""

    def __init__(self, key: str, value: object, allowed: list[str], source: str):
        allowed_str = ", ".join(f"'{a}'" for a in allowed)
        super().__init__(
            f"Invalid value {value!r} for '{key}' in {source}",
            hint=f"Use one of: {allowed_str}.",
        )
        self.key = key
        self.value = value
        self.allowed = allowed
        self.source = source
