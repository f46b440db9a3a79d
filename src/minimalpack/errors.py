"""Errors raised by minimalpack helpers."""

# ============================================================================
#                           General errors
# ============================================================================


class MinimalPackError(Exception):
    """Base class for minimalpack errors."""


class InvalidArgumentError(MinimalPackError, ValueError):
    """Raised when a helper is called in violation of its contract.

    Most helpers tolerate ``None`` and out-of-range inputs; the few that
    cannot give a meaningful answer raise this instead.
    """

    def __init__(self, param: str, reason: str) -> None:
        super().__init__(f"Invalid argument '{param}': {reason}")
        self.param = param
        self.reason = reason


class InvalidConfigError(MinimalPackError):
    """Raised when an environment override holds an unusable value."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(f"Invalid value {value!r} for {name}: {reason}")
        self.name = name
        self.value = value


# ============================================================================
#                   Copying / serialization errors
# ============================================================================


class SerializationError(MinimalPackError):
    """Base class for errors raised while duplicating object graphs."""


class DeepCopyError(SerializationError):
    """Raised when an object graph contains something that cannot be copied."""

    def __init__(self, type_name: str) -> None:
        super().__init__(f"Cannot deep copy object graph rooted at {type_name}.")
        self.type_name = type_name


# ============================================================================
#                           String errors
# ============================================================================


class MatchTimeoutError(MinimalPackError, TimeoutError):
    """Raised when a regular expression does not finish within its timeout."""

    def __init__(self, pattern: str, timeout: float) -> None:
        super().__init__(
            f"Matching pattern {pattern!r} did not complete within {timeout}s."
        )
        self.pattern = pattern
        self.timeout = timeout
