# errors.py
#
# Every failure in AlgoViz is a locally handled, user-visible message.
# Core code raises one of these; the presentation layer catches VisualizerError
# and shows str(error) as a notification.


class VisualizerError(Exception):
    """Base class for all user-facing errors."""

    title = "Error"


class InvalidInputError(VisualizerError, ValueError):
    title = "Invalid input"


class EmptyStructureError(VisualizerError):
    title = "Empty"


class ValueNotFoundError(VisualizerError, LookupError):
    title = "Not found"


class AnimationBusyError(VisualizerError):
    title = "Animation running"


class ConfigError(VisualizerError):
    title = "Configuration error"
