import string

from algokit.bits import (
    byte_lines,
    string_to_binary,
    subsets,
    to_binary_reversed,
    toggle_case,
    toggle_string,
)


def test_toggle_case_letters():
    for ch in string.ascii_letters:
        assert toggle_case(ch) == ch.swapcase()


def test_toggle_case_other_characters_unchanged():
    for ch in "0123 !?_\n":
        assert toggle_case(ch) == ch


def test_toggle_string_round_trip():
    text = "Hello, World 42"
    assert toggle_string(toggle_string(text)) == text
    assert toggle_string(text) == text.swapcase()


def test_binary_of_zero():
    assert to_binary_reversed(0) == "0"


def test_binary_positive_values():
    for n in (1, 2, 5, 255, 1024, 2**31 - 1):
        rev = to_binary_reversed(n)
        assert rev[::-1] == bin(n)[2:]
        assert int(rev[::-1], 2) == n


def test_binary_negative_uses_32_bits():
    rev = to_binary_reversed(-3)
    assert len(rev) == 32
    assert int(rev[::-1], 2) == (-3) & 0xFFFFFFFF


def test_string_to_binary_chunks():
    text = "Hi!"
    bits = string_to_binary(text)
    assert len(bits) == 8 * len(text)
    chunks = [bits[i:i + 8] for i in range(0, len(bits), 8)]
    assert [int(chunk, 2) for chunk in chunks] == [ord(c) for c in text]


def test_byte_lines_join_to_string_binary():
    text = "abc"
    lines = byte_lines(text)
    assert "".join(lines) == string_to_binary(text)
    assert all(len(line) == 8 for line in lines)


def test_bytes_input():
    assert string_to_binary(b"ab") == string_to_binary("ab")


def test_subsets_count_and_order():
    items = ["a", "b", "c"]
    result = list(subsets(items))
    assert len(result) == 2 ** len(items)
    assert result[0] == []
    assert result[-1] == items
    assert len({tuple(s) for s in result}) == len(result)


def test_subsets_of_empty():
    assert list(subsets([])) == [[]]