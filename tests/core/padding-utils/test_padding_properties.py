from hypothesis import (
    given,
    strategies as st,
)

from pad_left import (
    LeftPadder,
    left_pad,
)

fill_chars = st.characters()
lengths = st.integers(min_value=0, max_value=200)

# fast path disabled, so every space pad goes through the doubling builder
DoublingPadder = LeftPadder.configure(short_pad_buffer="")


@given(st.text(), fill_chars, st.data())
def test_no_padding_when_value_is_long_enough(value, fill_char, data):
    length = data.draw(st.integers(min_value=0, max_value=len(value)))
    assert left_pad(value, length, fill_char) == value


@given(st.text(), lengths, fill_chars)
def test_padded_length(value, length, fill_char):
    padded = left_pad(value, length, fill_char)
    assert len(padded) == max(length, len(value))


@given(st.text(), lengths, fill_chars)
def test_value_is_kept_as_suffix(value, length, fill_char):
    padded = left_pad(value, length, fill_char)
    assert padded.endswith(value)


@given(st.text(), lengths, fill_chars)
def test_prefix_is_only_fill_characters(value, length, fill_char):
    padded = left_pad(value, length, fill_char)
    prefix = padded[: len(padded) - len(value)]
    expected_fill = " " if fill_char == "\x00" else fill_char
    assert prefix == expected_fill * len(prefix)


@given(st.text(), lengths)
def test_null_fill_is_same_as_space(value, length):
    assert left_pad(value, length, "\x00") == left_pad(value, length, " ")


@given(
    st.text(),
    st.integers(min_value=0, max_value=60),
    st.sampled_from((" ", "\x00", None)),
)
def test_short_pad_matches_doubling_pad(value, length, fill_char):
    assert LeftPadder.pad(value, length, fill_char) == DoublingPadder.pad(
        value, length, fill_char
    )
