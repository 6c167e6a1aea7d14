from solitude.interpreter import Interpreter


def test_program_1_hello(example_lines, capsys):
    interp = Interpreter()
    interp.run(example_lines('program_1.sol'))
    out = capsys.readouterr().out.strip()
    assert out == 'Hello World!!'
