"""Domain errors for resulturls."""


class UrlGeneratorError(ValueError):
    """Raised when a URL cannot be generated from the given inputs."""


class InvalidTestId(UrlGeneratorError):
    """Raised when a test id lacks the structure a URL layout depends on."""


class ConfigError(UrlGeneratorError):
    """Raised when the configuration file cannot be used."""
