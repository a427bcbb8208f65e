from quant_mathema.errors import InvalidCastError, QuantMathemaError


def test_invalid_cast_default_message():
    assert str(InvalidCastError()) == "Invalid cast during computation"


def test_invalid_cast_custom_message_is_kept():
    err = InvalidCastError("bad value")
    assert str(err) == "bad value"
    assert err.args == ("bad value",)


def test_invalid_cast_is_base_error_with_default_message():
    err = InvalidCastError()
    assert isinstance(err, QuantMathemaError)
    assert str(err) == InvalidCastError.default_message
    assert InvalidCastError.default_message == "Invalid cast during computation"


def test_invalid_cast_is_value_error():
    err = InvalidCastError()
    assert isinstance(err, ValueError)
    assert str(err) == "Invalid cast during computation"


def test_base_error_keeps_message():
    err = QuantMathemaError("oops")
    assert isinstance(err, Exception)
    assert str(err) == "oops"
    assert err.args == ("oops",)
    assert not isinstance(err, InvalidCastError)