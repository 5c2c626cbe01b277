"""Exceptions shared by the loader, the inference adapter and the web layer.

- ArtifactLoadError : model or word index could not be read at startup
- NotReadyError     : prediction requested before both artifacts are loaded

Unknown words are not an error; they map to the OOV id.
"""


class SentimentError(RuntimeError):
    """Base class for sentiment app errors."""


class ArtifactLoadError(SentimentError):
    """Model or word index artifact failed to load or parse."""

    def __init__(self, message, path=None):
        super().__init__(message)
        self.path = path


class NotReadyError(SentimentError):
    """Raised when predict is called before the model is ready."""

    def __init__(self, state):
        super().__init__(f'model not ready (state: {getattr(state, "value", state)})')
        self.state = state
