"""Error types raised while talking to the Hue Bridge."""


class HueControlError(Exception):
    """Base class for hue-control errors."""


class MissingConfig(HueControlError):
    """A required configuration value has not been set."""

    def __init__(self, field: str):
        super().__init__(f"Missing configuration: {field}")
        self.field = field


class TransportError(HueControlError):
    """The HTTP layer could not complete a request."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Error calling {url}: {reason}")
        self.url = url
        self.reason = reason


class UnexpectedResponseShape(HueControlError):
    """The bridge returned JSON that doesn't match what the command expects."""
