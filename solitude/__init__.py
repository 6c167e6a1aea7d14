# Solitude language package
# This package provides an interpreter for the line-oriented Solitude scripting language.
from .interpreter import run_program, run_file, Interpreter
from .errors import SolitudeError

__all__ = [
    'run_program',
    'run_file',
    'Interpreter',
    'SolitudeError',
]
