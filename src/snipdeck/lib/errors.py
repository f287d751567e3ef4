"""Custom exception hierarchy for SnipDeck configuration and snippet operations."""


class SnipDeckError(Exception):
    """Base exception for all SnipDeck errors.

    All SnipDeck-specific exceptions inherit from this class, so hosts can
    report any engine failure through a single handler.
    """

    pass


class ConfigError(SnipDeckError):
    """Settings could not be loaded, parsed or validated.

    Attributes:
        field: Config key (or loader stage) the problem was found in
        message: What is wrong with it
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"Configuration error in '{field}': {message}")


class ValidationError(SnipDeckError):
    """A value given to the engine was rejected.

    Used for user input the engine checks itself, such as the name of a
    captured snippet.

    Attributes:
        field: Name of the rejected input
        message: Why it was rejected
        expected: What an acceptable value looks like
        actual: The value that was given
    """

    def __init__(self, field: str, message: str, expected: str, actual: str) -> None:
        self.field = field
        self.message = message
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Validation error in '{field}': {message}\n"
            f"  Expected: {expected}\n"
            f"  Got: {actual}"
        )


class FileNotFoundError(SnipDeckError):
    """The snippet source or a config file is missing.

    Shadows the builtin inside SnipDeck so callers can catch it together
    with every other ``SnipDeckError``.

    Attributes:
        path: The missing path
        message: Hint on how to fix it
    """

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"File not found: {path}\n{message}")


class StateError(SnipDeckError):
    """Exception raised when the persisted selection state is unusable."""

    def __init__(self, path: str, message: str) -> None:
        """Create a state error for the given state file."""
        self.path = path
        self.message = message
        super().__init__(f"Selection state error at {path}: {message}")


class ParseError(SnipDeckError):
    """Exception raised when outline source text cannot be tokenized.

    Malformed heading depth sequences are not parse errors; only input that
    cannot be read as text at all (for example an undecodable byte
    sequence) is.
    """

    def __init__(self, message: str, source: str | None = None) -> None:
        """Create a parse error.

        Args:
            message: Description of the tokenizing failure
            source: Optional path or label of the source being parsed
        """
        self.message = message
        self.source = source
        prefix = f"Cannot parse outline {source}" if source else "Cannot parse outline"
        super().__init__(f"{prefix}: {message}")


class CategoryNotFoundError(SnipDeckError):
    """Exception raised when a requested category does not exist."""

    def __init__(self, category: str | None) -> None:
        """Create an error for a missing or unselected category."""
        self.category = category
        if category is None:
            message = "No snippet category selected"
        else:
            message = f"No category named '{category}'"
        super().__init__(message)


class SnippetNotFoundError(SnipDeckError):
    """Exception raised when no snippet in the active category has a name."""

    def __init__(self, name: str, category: str | None = None) -> None:
        """Create an error naming the snippet and the category searched."""
        self.name = name
        self.category = category
        where = f" in category '{category}'" if category else ""
        super().__init__(f"No snippet named '{name}'{where}")


class DispatchError(SnipDeckError):
    """Base exception for failures while running a snippet's behavior."""

    pass


class FunctionNotFoundError(DispatchError):
    """Raised when a function snippet has no registered callable and no block.

    Attributes:
        name: The snippet name that was looked up in the capability registry
    """

    def __init__(self, name: str) -> None:
        """Create the error for an unregistered capability name."""
        self.name = name
        super().__init__(
            f"No function registered as '{name}' and the snippet has no "
            f"executable block"
        )


class NoExecutableBlockError(DispatchError):
    """Raised when function snippet content is not a runnable source block.

    Attributes:
        name: Snippet name
        reason: Why the content was rejected
    """

    def __init__(self, name: str, reason: str) -> None:
        """Create the error with the rejection reason."""
        self.name = name
        self.reason = reason
        super().__init__(f"Snippet '{name}' has no executable block: {reason}")


class SnippetExecutionError(DispatchError):
    """Raised when a snippet's function or source block fails while running.

    Attributes:
        name: Snippet name
        error: The exception raised by the function or block
    """

    def __init__(self, name: str, error: Exception) -> None:
        """Create the error wrapping the failure raised by the snippet."""
        self.name = name
        self.error = error
        super().__init__(f"Snippet '{name}' failed: {type(error).__name__}: {error}")
