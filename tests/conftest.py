from pathlib import Path

import pytest

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


@pytest.fixture
def example_lines():
    def load(name: str):
        with open(EXAMPLES / name, 'r', encoding='utf-8') as f:
            return f.read().splitlines()
    return load
