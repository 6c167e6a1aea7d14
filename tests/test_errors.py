from solitude.errors import (
    ErrorVal, MalformedExpression, SolitudeError, ThreadJoinFailure, UndefinedVariable,
)


def test_error_wraps_an_error_value():
    err = ErrorVal('Custom', 'something went wrong')
    exc = SolitudeError(err)
    assert exc.err is err
    assert str(exc) == 'Custom: something went wrong'


def test_named_errors_use_their_class_name():
    exc = UndefinedVariable('undefined variable x')
    assert exc.err == ErrorVal('UndefinedVariable', 'undefined variable x')
    assert isinstance(exc, SolitudeError)
    assert ThreadJoinFailure('t').err.name == 'ThreadJoinFailure'
    assert MalformedExpression('e').err.name == 'MalformedExpression'
