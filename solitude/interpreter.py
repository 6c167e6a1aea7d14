"""Control-flow interpreter for the Solitude language.

A Solitude script is a list of lines. `Interpreter.execute_block` walks
a block of lines with its own cursor, classifies each line and
dispatches it. Structured statements (`if`, `func`, `...` comments and
`!!` concurrent blocks) ask the scanner to carve out their body and
move the cursor past the closing sentinel; conditional bodies are run
by calling `execute_block` again, so the same logic applies at every
nesting depth.

Concurrent blocks run on their own threads and share the interpreter's
variable store and function table. A block waits for the threads it
spawned itself before it returns.
"""

from __future__ import annotations

import builtins
import itertools
import sys
import threading
from typing import List, Optional, Sequence

from .environment import FunctionTable, VariableStore
from .errors import (
    MalformedDeclaration, SolitudeError, ThreadJoinFailure, UnreadableScript,
)
from .evaluator import evaluate, format_number, needs_evaluation
from .scanner import scan_comment, scan_concurrent, scan_conditional, scan_function
from .syntax import DEFAULT_PROMPT, INPUT_VAR_SPLIT, Statement, StatementKind, classify
from .text import decode_escapes, interpolate, is_ident_char


class BlockThread(threading.Thread):
    """Runs one concurrent block; keeps any escaping exception for the join."""
    def __init__(self, interpreter: 'Interpreter', lines: List[str], name: str):
        super().__init__(name=name)
        self.interpreter = interpreter
        self.lines = lines
        self.error: Optional[BaseException] = None

    def run(self):
        try:
            self.interpreter.execute_block(self.lines)
        except Exception as e:
            self.error = e


class Interpreter:
    """Core interpreter that executes Solitude scripts."""
    def __init__(self, debug_level: int = 0, debug_file: Optional[str] = 'debug.txt'):
        self.variables = VariableStore()
        self.functions = FunctionTable()
        self.debug_level = debug_level
        self.debug_fp = open(debug_file, 'w', encoding='utf-8') if debug_level > 0 and debug_file else None
        self._io_lock = threading.Lock()
        self._thread_ids = itertools.count(1)

    def debug(self, msg: str, level: int = 1):
        if self.debug_level >= level:
            with self._io_lock:
                if self.debug_fp:
                    self.debug_fp.write(msg + '\n')
                    self.debug_fp.flush()
                else:
                    print(msg, file=sys.stderr)

    def report(self, error: SolitudeError):
        """Write a non-fatal error to stderr and carry on."""
        err = error.err
        with self._io_lock:
            print(f"Error: {err.name}: {err.message}", file=sys.stderr, flush=True)
        self.debug(f"[{threading.current_thread().name}] {err!r}")

    def emit(self, text: str):
        with self._io_lock:
            print(text, end='', flush=True)

    def render(self, text: str) -> str:
        """Interpolate variables, then decode escapes."""
        return decode_escapes(interpolate(text, self.variables, self.report))

    # Public API
    def run(self, lines: Sequence[str]):
        try:
            self.execute_block(list(lines))
        finally:
            if self.debug_fp:
                self.debug_fp.close()
                self.debug_fp = None

    def execute_block(self, lines: Sequence[str]):
        threads: List[BlockThread] = []
        cursor = 0
        while cursor < len(lines):
            statement = classify(lines[cursor])
            if statement.kind is StatementKind.SPAWN:
                body, cursor = scan_concurrent(lines, cursor)
                threads.append(self.spawn(body))
                continue
            cursor = self.execute(statement, lines, cursor)
        self.join(threads)

    def execute(self, statement: Statement, lines: Sequence[str], cursor: int) -> int:
        """Run one statement and return the cursor of the next one."""
        kind = statement.kind
        if self.debug_level >= 3 and kind is not StatementKind.BLANK:
            self.debug(f"[{threading.current_thread().name}] {kind.value}: {statement.text}", 3)
        body: List[str] = []
        next_cursor = cursor + 1
        if kind is StatementKind.BLOCK_COMMENT:
            _, next_cursor = scan_comment(lines, cursor)
        elif kind is StatementKind.IF:
            body, next_cursor = scan_conditional(lines, cursor)
        elif kind is StatementKind.FUNC:
            body, next_cursor = scan_function(lines, cursor)
        try:
            self.dispatch(statement, body)
        except SolitudeError as e:
            self.report(e)
        return next_cursor

    def dispatch(self, statement: Statement, body: List[str]):
        kind = statement.kind
        if kind is StatementKind.DECLARE:
            self.declare(statement)
        elif kind is StatementKind.DELETE:
            self.variables.delete(statement.argument)
            self.debug(f"delete {statement.argument}", 2)
        elif kind is StatementKind.IF:
            truthy = self.condition(statement.argument)
            self.debug(f"if {statement.argument} -> {truthy}", 3)
            if truthy:
                self.execute_block(body)
        elif kind is StatementKind.FUNC:
            name = check_identifier(statement.argument, statement)
            self.functions.define(name, body)
            self.debug(f"define function {name} ({len(body)} lines)", 2)
        elif kind is StatementKind.CALL:
            self.call_function(statement.argument)
        elif kind is StatementKind.INPUT:
            self.read_input(statement)
        elif kind is StatementKind.OUTPUT:
            self.emit(self.render(statement.text))
        # blank lines and comments do nothing

    def declare(self, statement: Statement):
        name, sep, expr = statement.argument.partition('=')
        if not sep:
            raise MalformedDeclaration(f'invalid variable declaration: {statement.text}')
        name = check_identifier(name.strip(), statement)
        value = interpolate(expr.strip(), self.variables, self.report)
        if needs_evaluation(value):
            value = format_number(evaluate(value))
        self.variables.set(name, value)
        self.debug(f"declare {name} = {value!r}", 2)

    def condition(self, text: str) -> bool:
        return evaluate(interpolate(text, self.variables, self.report)) != 0.0

    def call_function(self, name: str):
        # the table hands out an immutable copy, so redefinitions made
        # while this body runs do not affect it
        body = self.functions.get(name)
        for line in body:
            self.emit(self.render(line))

    def read_input(self, statement: Statement):
        name, sep, prompt = statement.argument.partition(INPUT_VAR_SPLIT)
        name = check_identifier(name.strip(), statement)
        prompt = self.render(prompt.strip()) if sep else DEFAULT_PROMPT
        # the prompt goes through the output lock like any other output
        self.emit(prompt)
        try:
            value = builtins.input()
        except EOFError:
            value = ''
        self.variables.set(name, value.strip())

    def spawn(self, body: List[str]) -> BlockThread:
        thread = BlockThread(self, body, name=f'block-{next(self._thread_ids)}')
        self.debug(f"spawn {thread.name} ({len(body)} lines)")
        thread.start()
        return thread

    def join(self, threads: List[BlockThread]):
        for thread in threads:
            thread.join()
            if thread.error is not None:
                self.report(ThreadJoinFailure(f'{thread.name} did not finish cleanly: {thread.error}'))
            else:
                self.debug(f"joined {thread.name}")


def check_identifier(name: str, statement: Statement) -> str:
    if not name or not all(is_ident_char(c) for c in name):
        raise MalformedDeclaration(f'invalid name {name!r} in: {statement.text}')
    return name


def load_script(file_path: str) -> List[str]:
    """Read a script file into its lines."""
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise UnreadableScript(f'could not open file {file_path}: {e}') from e


def run_program(source: str, debug_level: int = 0) -> Interpreter:
    """Convenience function to run a Solitude program from a source string."""
    interpreter = Interpreter(debug_level=debug_level)
    interpreter.run(source.splitlines())
    return interpreter


def run_file(file_path: str, debug_level: int = 0, debug_file: Optional[str] = 'debug.txt') -> Interpreter:
    """Run a Solitude script file, returning the interpreter instance."""
    lines = load_script(file_path)
    interpreter = Interpreter(debug_level=debug_level, debug_file=debug_file)
    interpreter.run(lines)
    return interpreter
