from solitude.interpreter import Interpreter


def test_program_4_function_redefinition(example_lines, capsys):
    interp = Interpreter()
    interp.run(example_lines('program_4.sol'))
    captured = capsys.readouterr()
    assert captured.out == 'Hello, Ada!\nBye, Ada.\n'
    assert captured.err == ''
