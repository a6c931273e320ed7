"""Exceptions raised by mdsplit.

Everything derives from MdSplitError, so an embedding application can catch
one type around configuration loading and splitting.
"""


class MdSplitError(Exception):
    """Base exception for all mdsplit errors."""


class ConfigError(MdSplitError):
    """A splitter setting is invalid.

    Raised for bad limits passed to a splitter, unknown length units or
    encodings, and settings that fail validation while loading a
    SplitterConfig.

    Attributes:
        field: Setting name, e.g. ``chunk_size``.
        message: What is wrong with the value.
        env_var: ``MDSPLIT_*`` variable the value was read from, if any.
    """

    def __init__(self, field: str, message: str, env_var: str | None = None) -> None:
        self.field = field
        self.message = message
        self.env_var = env_var
        source = f" (from {env_var})" if env_var else ""
        super().__init__(f"Invalid splitter setting '{field}'{source}: {message}")


class ValidationError(MdSplitError):
    """Input handed to the splitter has the wrong shape.

    Attributes:
        field: Argument name.
        message: What is wrong.
        expected: Expected type or form.
        actual: What was received.
    """

    def __init__(self, field: str, message: str, expected: str, actual: str) -> None:
        self.field = field
        self.message = message
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid {field}: {message} (expected {expected}, got {actual})"
        )


class ParseError(MdSplitError):
    """The markdown parser rejected its input.

    The parser exception is chained as ``__cause__`` and its message is kept
    verbatim.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class RenderError(MdSplitError):
    """A document node cannot be rendered into chunk text.

    Attributes:
        kind: Kind of the offending node.
        message: Why it cannot be rendered.
    """

    def __init__(self, kind: str, message: str) -> None:
        self.kind = kind
        self.message = message
        super().__init__(f"Cannot render '{kind}' node: {message}")
