import pytest

from solitude.syntax import StatementKind, classify, is_terminator


@pytest.mark.parametrize('line, kind, argument', [
    ('', StatementKind.BLANK, ''),
    ('   ', StatementKind.BLANK, ''),
    ('...', StatementKind.BLOCK_COMMENT, ''),
    ('  ...  ', StatementKind.BLOCK_COMMENT, ''),
    ('.. not a block comment', StatementKind.COMMENT, '. not a block comment'),
    ('. note', StatementKind.COMMENT, ' note'),
    ('var x = 1', StatementKind.DECLARE, 'x = 1'),
    ('-x', StatementKind.DELETE, 'x'),
    ('if $x >= 1', StatementKind.IF, '$x >= 1'),
    ('func greet', StatementKind.FUNC, 'greet'),
    ('call greet', StatementKind.CALL, 'greet'),
    ('input name -> Name?', StatementKind.INPUT, 'name -> Name?'),
    ('!!', StatementKind.SPAWN, ''),
    ('Hello $name\\n', StatementKind.OUTPUT, 'Hello $name\\n'),
])
def test_classify(line, kind, argument):
    statement = classify(line)
    assert statement.kind is kind
    assert statement.argument == argument


def test_classify_trims_the_line():
    statement = classify('    var  y=2   ')
    assert statement.kind is StatementKind.DECLARE
    assert statement.text == 'var  y=2'
    assert statement.argument == 'y=2'


def test_keyword_without_trailing_space_is_output():
    # `if`, `func` and `call` only count with their separating space
    for word in ('if', 'func', 'call', 'variable', 'iffy'):
        assert classify(word).kind is StatementKind.OUTPUT


def test_is_terminator():
    assert is_terminator('  fi', 'fi')
    assert is_terminator('finish', 'fi')  # prefix match
    assert is_terminator('...', '...')
    assert not is_terminator('....', '...')
    assert is_terminator('?? end', '??')
    assert not is_terminator('x ??', '??')
