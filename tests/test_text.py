from solitude.environment import VariableStore
from solitude.text import decode_escapes, interpolate


def make_store(**values):
    store = VariableStore()
    for name, value in values.items():
        store.set(name, value)
    return store


def test_interpolate_substitutes_references():
    store = make_store(name='World', n_1='7')
    assert interpolate('Hello, $name!', store) == 'Hello, World!'
    assert interpolate('$n_1$name', store) == '7World'
    assert interpolate('end $name', store) == 'end World'


def test_interpolate_undefined_is_empty_and_reported():
    errors = []
    out = interpolate('a $missing b', make_store(), errors.append)
    assert out == 'a  b'
    assert len(errors) == 1
    assert errors[0].err.name == 'UndefinedVariable'
    assert 'missing' in errors[0].err.message


def test_interpolate_is_single_pass():
    store = make_store(a='$b', b='x')
    assert interpolate('$a', store) == '$b'


def test_interpolate_without_dollar_is_identity():
    text = 'no references here \\n 1 + 2'
    assert interpolate(text, make_store()) == text


def test_decode_escapes():
    assert decode_escapes('\\n\\t\\x41\\033') == '\n\tA\x1b'
    assert decode_escapes('a\\rb') == 'a\rb'
    assert decode_escapes('\\x6a\\x4A') == 'jJ'


def test_decode_unrecognized_escapes_verbatim():
    assert decode_escapes('\\q') == '\\q'
    assert decode_escapes('\\xZZ') == '\\xZZ'
    assert decode_escapes('\\x4') == '\\x4'
    assert decode_escapes('\\0') == '\\0'
    assert decode_escapes('\\034') == '\\034'
    assert decode_escapes('trailing \\') == 'trailing \\'


def test_decode_does_not_rescan_output():
    # \x5c is a backslash; the `n` after it stays literal
    assert decode_escapes('\\x5cn') == '\\n'


def test_decode_without_backslash_is_identity():
    text = 'plain $text'
    assert decode_escapes(text) == text
