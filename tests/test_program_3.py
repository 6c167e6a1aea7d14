from solitude.interpreter import Interpreter


def test_program_3_conditionals(example_lines, capsys):
    interp = Interpreter()
    interp.run(example_lines('program_3.sol'))
    out_lines = capsys.readouterr().out.strip().split('\n')
    assert out_lines == ['x is at least five', 'done']
