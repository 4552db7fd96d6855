"""Typed exceptions raised while building or evaluating generators."""


class GeneratorError(Exception):
    """Base class for all valuegen errors."""


class ContractViolation(GeneratorError, ValueError):
    """Raised when a generator is built or invoked with invalid arguments.

    These are programmer errors (inverted bounds, empty collections,
    non-generator arguments) and are never retried.
    """


class SuchThatExhausted(GeneratorError):
    """Raised when ``such_that`` runs out of tries without a matching value."""

    def __init__(self, tries: int):
        self.tries = tries
        super().__init__(
            f"Exceeded number of tries ({tries}) to satisfy predicate; "
            "raise the number of tries or relax the predicate"
        )


class ConfigError(GeneratorError, ValueError):
    """Raised when session configuration cannot be loaded."""


class ModelError(GeneratorError, ValueError):
    """Raised when a model document is malformed."""

    def __init__(self, message: str, path: str = ""):
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)
