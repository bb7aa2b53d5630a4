import pytest

from torrentread.bencode import BencodeError, format_value, parse_bencode


# --- strings -----------------------------------------------------------------

@pytest.mark.parametrize(
    "encoded, expected",
    [
        (b"1:a", b"a"),
        (b"0:", b""),
        (b"2::a", b":a"),
        (b"02::a", b":a"),
        (b"12:123456789012", b"123456789012"),
    ],
)
def test_parse_string(encoded, expected):
    remaining, value = parse_bencode(encoded)
    assert remaining == b""
    assert value == expected


def test_parse_long_random_string():
    text = (
        b"abcwifieeirwjrwriwruvsfjkadfjieqie83e19jr29rj2rjofjafdmqdiqdhquhdusdks"
        b"><odjwiereir::sidsifq0eee}}][p"
    )
    encoded = str(len(text)).encode() + b":" + text
    remaining, value = parse_bencode(encoded)
    assert remaining == b""
    assert value == text


@pytest.mark.parametrize(
    "encoded",
    [b"x2:abc", b"2!:abc", b"10$:a", b"-1:a", b"-2:ab", b"5:abc", b"3abc"],
)
def test_parse_string_errors(encoded):
    with pytest.raises(BencodeError):
        parse_bencode(encoded)


# --- integers ----------------------------------------------------------------

@pytest.mark.parametrize(
    "encoded, expected",
    [
        (b"i123e", 123),
        (b"i0e", 0),
        (b"i-12e", -12),
        (b"i99839e", 99839),
        (b"i-99839e", -99839),
        (b"i9223372036854775807e", 9223372036854775807),
        (b"i-9223372036854775808e", -9223372036854775808),
    ],
)
def test_parse_int(encoded, expected):
    remaining, value = parse_bencode(encoded)
    assert remaining == b""
    assert value == expected


@pytest.mark.parametrize(
    "encoded",
    [
        b"i-0e",
        b"i00e",
        b"i122d",
        b"ie",
        b"i+e",
        b"i+0e",
        b"i0.e",
        b"i-1.0e",
        b"i-e",
        b"i12",
        b"i9223372036854775808e",
    ],
)
def test_parse_int_errors(encoded):
    with pytest.raises(BencodeError):
        parse_bencode(encoded)


def test_parse_returns_remaining_bytes():
    remaining, value = parse_bencode(b"i5eabc")
    assert value == 5
    assert remaining == b"abc"


def test_empty_input_is_error():
    with pytest.raises(BencodeError, match="empty input"):
        parse_bencode(b"")


def test_error_is_value_error():
    with pytest.raises(ValueError):
        parse_bencode(b"?")


# --- lists -------------------------------------------------------------------

def test_parse_simple_list():
    remaining, value = parse_bencode(b"li1ei2e3:abce")
    assert remaining == b""
    assert value == [1, 2, b"abc"]


def test_parse_complex_list():
    remaining, value = parse_bencode(b"li1ei2e3:abcli3ei4e2:abee")
    assert remaining == b""
    assert len(value) == 4
    assert value[3] == [3, 4, b"ab"]


def test_parse_empty_list():
    remaining, value = parse_bencode(b"lei7e")
    assert value == []
    assert remaining == b"i7e"


@pytest.mark.parametrize("encoded", [b"l", b"li1e", b"li1ex", b"lxe"])
def test_parse_list_errors(encoded):
    with pytest.raises(BencodeError):
        parse_bencode(encoded)


# --- dictionaries ------------------------------------------------------------

@pytest.mark.parametrize(
    "encoded, expected",
    [
        (b"de", {}),
        (b"d1:a1:be", {"a": b"b"}),
        (b"d2:abi3ee", {"ab": 3}),
        (b"d2:abli1ei2ei3eee", {"ab": [1, 2, 3]}),
    ],
)
def test_parse_dict(encoded, expected):
    remaining, value = parse_bencode(encoded)
    assert remaining == b""
    assert value == expected


@pytest.mark.parametrize(
    "encoded",
    [
        b"di3ei4e",
        b"d1:a1:b",
        b"d1:a",
        b"d1:a1:b1:c",
        b"di32e1:b1:ci3ee",
        b"d1:a1:bd",
        b"d-1:a1:be",
    ],
)
def test_parse_dict_errors(encoded):
    with pytest.raises(BencodeError):
        parse_bencode(encoded)


def test_parse_nested_dict():
    remaining, value = parse_bencode(b"d4:infod4:name3:fooee")
    assert remaining == b""
    assert value == {"info": {"name": b"foo"}}


def test_non_utf8_key_round_trips():
    _, value = parse_bencode(b"d2:\xff\xfei1ee")
    (key,) = value.keys()
    assert key.encode("utf-8", "surrogateescape") == b"\xff\xfe"
    assert value[key] == 1


# --- formatting --------------------------------------------------------------

def test_format_int():
    assert format_value(5, 0) == "[Int] 5\n"


def test_format_int_indented():
    assert format_value(-3, 2) == "    [Int] -3\n"


def test_format_printable_string():
    assert format_value(b"hello", 0) == '[String] "hello"\n'


def test_format_binary_string():
    assert format_value(b"\x00\x01\xff", 1) == "  [String] 0x0001ff\n"


def test_format_truncated_string():
    text = b"abcdefghijklmnopqrstuvwxyz"
    assert format_value(text, 0) == '[String] "abcdefghijklmnopqrst"... (truncated)\n'


def test_format_list():
    assert format_value([1, b"a"], 0) == '[List] (\n  [Int] 1\n  [String] "a"\n)\n'


def test_format_dict():
    expected = '[Dict] {\n  Key: "k"\n  [Int] 7\n}\n'
    assert format_value({"k": 7}, 0) == expected


def test_format_parsed_document():
    _, value = parse_bencode(b"d1:ali1eee")
    expected = '[Dict] {\n  Key: "a"\n  [List] (\n    [Int] 1\n  )\n}\n'
    assert format_value(value, 0) == expected


def test_format_unknown_type():
    assert format_value(1.5, 1) == "  [Unknown Type]\n"