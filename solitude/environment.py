import threading
from typing import Dict, Iterable, Sequence, Tuple

from solitude.errors import UndefinedFunction, UndefinedVariable


class VariableStore:
    """Maps identifiers to string values.

    One store is shared by every block of a script run, including blocks
    running on other threads. Each operation takes the lock for its own
    duration only, so statements from concurrent blocks may interleave.
    """
    def __init__(self):
        self._lock = threading.Lock()
        self.values: Dict[str, str] = {}

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return name in self.values

    def get(self, name: str) -> str:
        with self._lock:
            if name in self.values:
                return self.values[name]
        raise UndefinedVariable(f'undefined variable {name}')

    def set(self, name: str, value: str):
        with self._lock:
            self.values[name] = str(value)

    def delete(self, name: str):
        with self._lock:
            if name in self.values:
                del self.values[name]
                return
        raise UndefinedVariable(f'undefined variable {name}')

    def snapshot(self) -> Dict[str, str]:
        with self._lock:
            return dict(self.values)


class FunctionTable:
    """Maps function names to their captured body lines."""
    def __init__(self):
        self._lock = threading.Lock()
        self.bodies: Dict[str, Tuple[str, ...]] = {}

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return name in self.bodies

    def define(self, name: str, body: Iterable[str]):
        # bodies are frozen so a later redefinition never touches a copy
        # already handed out to a caller
        frozen = tuple(body)
        with self._lock:
            self.bodies[name] = frozen

    def get(self, name: str) -> Sequence[str]:
        with self._lock:
            if name in self.bodies:
                return self.bodies[name]
        raise UndefinedFunction(f'undefined function {name}')
