from dataclasses import dataclass


@dataclass
class ErrorVal:
    """Represents a Solitude runtime error.

    Errors carry a name (the error kind) and a message. None of them
    stop a script: the interpreter reports them and moves on to the next
    statement.
    """
    name: str
    message: str

    def __repr__(self) -> str:
        return f"Error(name={self.name!r}, message={self.message!r})"


class SolitudeError(Exception):
    """Exception type used to propagate Solitude runtime errors."""
    def __init__(self, err: ErrorVal):
        super().__init__(f"{err.name}: {err.message}")
        self.err = err


class _NamedError(SolitudeError):
    """A `SolitudeError` whose error name is its class name."""
    def __init__(self, message: str):
        super().__init__(ErrorVal(type(self).__name__, message))


class MalformedDeclaration(_NamedError):
    """A declaration or definition is missing its required separator."""


class MalformedExpression(_NamedError):
    """An expression could not be split into tokens."""


class UndefinedVariable(_NamedError):
    """A variable was read or deleted before being declared."""


class UndefinedFunction(_NamedError):
    """A call names a function that was never defined."""


class UnreadableScript(_NamedError):
    """The script file is missing or cannot be opened."""


class ThreadJoinFailure(_NamedError):
    """A concurrent block did not terminate cleanly."""
