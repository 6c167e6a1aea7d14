from solitude.interpreter import Interpreter


def test_program_6_concurrent_blocks(example_lines, capsys):
    """Both concurrent blocks finish before the top-level run returns,
    so every variable they set is visible afterwards."""
    interp = Interpreter()
    interp.run(example_lines('program_6.sol'))
    captured = capsys.readouterr()
    assert captured.out == 'done\n'
    assert captured.err == ''
    assert interp.variables.snapshot() == {'left': '1', 'right': '2', 'third': '3'}
