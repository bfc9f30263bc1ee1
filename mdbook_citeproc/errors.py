"""Exceptions raised by the preprocessor. The CLI turns them into exit codes."""


class CiteprocError(Exception):
    """Base class for every error the preprocessor raises."""


class ConfigError(CiteprocError):
    """The preprocessor table in book.toml is unusable."""


class ConfigMissing(ConfigError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No config table for {name} preprocessor")


class InvalidFeatureValue(ConfigError):
    def __init__(self, feature: str, value: str):
        self.feature = feature
        self.value = value
        super().__init__(
            f'{feature} must be either "transpile" or "preserve" (got {value!r})'
        )


class IncompleteBibliography(ConfigError):
    def __init__(self):
        super().__init__(
            "citations set to transpile so bibliography-style and bibliography "
            "option must be provided!"
        )


class ConversionError(CiteprocError):
    """Running the external converter failed."""

    def __init__(self, message: str, executable: str):
        self.executable = executable
        super().__init__(message)


class ProcessSpawnFailed(ConversionError):
    def __init__(self, executable: str, reason: object):
        super().__init__(f"failed to spawn {executable}: {reason}", executable)


class ProcessIoFailed(ConversionError):
    def __init__(self, executable: str, reason: object):
        super().__init__(f"failed to write to {executable} stdin: {reason}", executable)


class HostProtocolError(CiteprocError):
    """mdbook sent a payload or version string we cannot read."""
