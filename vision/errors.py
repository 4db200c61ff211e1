class LabelDetectionError(Exception):
    """Base class for errors raised while handling a detection request."""


class ExternalServiceError(LabelDetectionError):
    """The vision service call failed; the message is the underlying one."""
