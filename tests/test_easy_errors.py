import pytest

from parsestreams.easy_errors import Error, ErrorKind, Errors, Info, fmt_errors


def test_static_and_owned_info_compare_equal():
    assert Info.static("combine") == Info.owned("combine")
    assert Info.owned("combine") == Info.static("combine")
    assert hash(Info.static("combine")) == hash(Info.owned("combine"))


def test_token_and_text_info_differ():
    assert Info.token("a") != Info.static("a")
    assert Info.range("a") != Info.token("a")
    assert Info.token("a") == Info.token("a")


def test_info_display():
    assert str(Info.token(",")) == "`,`"
    assert str(Info.range("HTTP")) == "`HTTP`"
    assert str(Info.static("digit")) == "digit"
    assert str(Info.owned("digit")) == "digit"


def test_info_map_token_and_range():
    assert Info.token(1).map_token(lambda t: t + 1) == Info.token(2)
    assert Info.range("ab").map_token(str.upper) == Info.range("ab")
    assert Info.range("ab").map_range(str.upper) == Info.range("AB")
    assert Info.static("x").map_range(str.upper) == Info.static("x")


def test_error_constructors_kinds():
    assert Error.unexpected_token("a").kind is ErrorKind.UNEXPECTED
    assert Error.expected_range("ab").kind is ErrorKind.EXPECTED
    assert Error.message_static_message("m").kind is ErrorKind.MESSAGE
    assert Error.other(ValueError("boom")).kind is ErrorKind.OTHER


def test_error_format_vs_static_equal():
    assert Error.expected_format("combine") == Error.expected_static_message("combine")
    assert Error.unexpected_format("x") != Error.expected_format("x")


def test_other_errors_never_equal():
    err = Error.other(ValueError("boom"))
    assert err != err
    assert str(err) == "boom"


def test_end_of_input():
    eoi = Error.end_of_input()
    assert eoi.is_unexpected_end_of_input()
    assert str(eoi) == "Unexpected end of input"
    assert not Error.unexpected_token("a").is_unexpected_end_of_input()


def test_error_display():
    assert str(Error.unexpected_token(",")) == "Unexpected `,`"
    assert str(Error.expected_static_message("digit")) == "Expected digit"
    assert str(Error.message_static_message("Not a nine")) == "Not a nine"


def test_error_map_token():
    mapped = Error.expected_token(8).map_token(lambda t: t + 1)
    assert mapped == Error.expected_token(9)
    other = Error.other(ValueError("boom"))
    assert other.map_token(str).cause is other.cause


def test_error_without_info_rejected():
    with pytest.raises(ValueError):
        Error(ErrorKind.EXPECTED)
    with pytest.raises(ValueError):
        Error(ErrorKind.OTHER)


def test_fmt_errors_matches_documented_example():
    errors = Errors(
        "line: 2, column: 3",
        [
            Error.unexpected_token(","),
            Error.expected_token("."),
            Error.expected_token("a"),
            Error.expected_static_message("digit"),
        ],
    )
    expected = "Parse error at line: 2, column: 3\nUnexpected `,`\nExpected `.`, `a` or digit\n"
    assert str(errors) == expected


def test_fmt_errors_orders_messages_last():
    text = fmt_errors(
        [
            Error.message_static_message("Not a nine"),
            Error.expected_token("9"),
            Error.unexpected_token("8"),
        ]
    )
    assert text == "Unexpected `8`\nExpected `9`\nNot a nine\n"


def test_fmt_errors_empty():
    assert fmt_errors([]) == ""


def test_add_error_skips_duplicates():
    errors = Errors.empty(0)
    errors.add_error(Error.expected_token("a"))
    errors.add_error(Error.expected_token("a"))
    errors.add_error(Error.expected_static_message("a"))
    assert errors.errors == [Error.expected_token("a"), Error.expected_static_message("a")]


def test_set_expected_replaces_expected():
    errors = Errors.from_errors(
        0,
        [Error.unexpected_token("8"), Error.expected_token("9"), Error.expected_token("7")],
    )
    errors.set_expected(Info.static("digit"))
    assert errors.errors == [Error.unexpected_token("8"), Error.expected_static_message("digit")]


def test_clear_expected():
    errors = Errors.from_errors(0, [Error.unexpected_token("8"), Error.expected_token("9")])
    errors.clear_expected()
    assert errors.errors == [Error.unexpected_token("8")]


def test_merge_keeps_furthest():
    near = Errors(1, [Error.expected_token("a")])
    far = Errors(5, [Error.expected_token("b")])
    assert near.merge(far) is far
    assert Errors(5, [Error.expected_token("b")]).merge(Errors(1, [])).position == 5


def test_merge_same_position_combines_without_duplicates():
    left = Errors(0, [Error.expected_token("a")])
    right = Errors(0, [Error.expected_token("a"), Error.expected_token("b")])
    merged = left.merge(right)
    assert merged.errors == [Error.expected_token("a"), Error.expected_token("b")]


def test_map_position_and_tokens():
    errors = Errors(0, [Error.unexpected_token(56)])
    mapped = errors.map_position(lambda p: p + 1).map_token(chr)
    assert mapped == Errors(1, [Error.unexpected_token("8")])


def test_map_range():
    errors = Errors(0, [Error.unexpected_range(b"HTT")])
    mapped = errors.map_range(lambda r: r.decode())
    assert mapped.errors == [Error.unexpected_range("HTT")]


def test_errors_end_of_input():
    errors = Errors.end_of_input(3)
    assert errors.is_unexpected_end_of_input()
    assert errors.position == 3
    assert not Errors(3, [Error.expected_token("a")]).is_unexpected_end_of_input()


def test_errors_can_be_raised():
    with pytest.raises(Errors) as info:
        raise Errors.end_of_input(0)
    assert info.value == Errors(0, [Error.end_of_input()])