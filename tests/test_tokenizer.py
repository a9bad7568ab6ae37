"""Tests for the argument tokenizer."""

import pytest

from argtok import MalformedArguments, Token, Tokenizer, TokenType

KEY = TokenType.KEY
VALUE = TokenType.VALUE
IO = TokenType.IO


def classify(args: list[str]) -> list[tuple[str | None, TokenType]]:
    """Tokenize without pulling any values."""
    return [(t.text, t.kind) for t in Tokenizer(args)]


class TestValues:
    """Arguments without a leading hyphen."""

    def test_plain_values_in_order(self) -> None:
        """Hyphen-free arguments are all values, in order."""
        assert classify(["a", "b", "c"]) == [("a", VALUE), ("b", VALUE), ("c", VALUE)]

    def test_empty_argument(self) -> None:
        """An empty argument is an empty value."""
        assert classify([""]) == [("", VALUE)]

    def test_no_arguments(self) -> None:
        """An empty vector yields nothing."""
        tokenizer = Tokenizer([])
        assert tokenizer.next() is None
        assert not tokenizer.has_more

    def test_value_containing_equals(self) -> None:
        """Equal signs only split keys."""
        assert classify(["a=b"]) == [("a=b", VALUE)]


class TestShortKeys:
    """Single-hyphen keys and bundles."""

    def test_single_key(self) -> None:
        """"-v" is the key "v"."""
        assert classify(["-v"]) == [("v", KEY)]

    def test_bundle_is_split(self) -> None:
        """"-abc" is three keys."""
        assert classify(["-abc"]) == [("a", KEY), ("b", KEY), ("c", KEY)]

    def test_bundle_remainder_is_requeued(self) -> None:
        """The unread part of a bundle goes back on the queue."""
        tokenizer = Tokenizer(["-abc", "x"])
        assert tokenizer.next() == Token("a", KEY)
        assert tokenizer.remaining == ("-bc", "x")

    def test_separate_value_without_take(self) -> None:
        """A following argument is a value when nothing claims it."""
        assert classify(["-k", "value"]) == [("k", KEY), ("value", VALUE)]

    @pytest.mark.parametrize(
        "args",
        [
            ["-k", "value"],
            ["-kvalue"],
            ["-k=value"],
        ],
    )
    def test_key_value_forms(self, args: list[str]) -> None:
        """All short key/value spellings yield the same key and value."""
        tokenizer = Tokenizer(args)
        assert tokenizer.next() == Token("k", KEY)
        assert tokenizer.take_value() == "value"
        assert tokenizer.next() is None

    def test_value_inside_bundle(self) -> None:
        """A key in the middle of a bundle takes the rest as its value."""
        tokenizer = Tokenizer(["-vkfile"])
        assert tokenizer.next() == Token("v", KEY)
        assert tokenizer.next() == Token("k", KEY)
        assert tokenizer.take_value() == "file"
        assert not tokenizer.has_more

    def test_bundle_with_equals(self) -> None:
        """"-ab=x" gives keys "a" and "b", with "x" attached to "b"."""
        tokenizer = Tokenizer(["-ab=x"])
        assert tokenizer.next() == Token("a", KEY)
        assert tokenizer.next() == Token("b", KEY)
        assert tokenizer.take_attached_value() == "x"
        assert tokenizer.next() is None

    def test_bundle_tail_keeps_leading_hyphen(self) -> None:
        """Only the synthetic hyphen is stripped from a bundle tail."""
        tokenizer = Tokenizer(["-a-b"])
        assert tokenizer.next() == Token("a", KEY)
        assert tokenizer.take_value() == "-b"

    @pytest.mark.parametrize(
        ("take", "expected"),
        [
            ("take_value", "x"),
            ("take_attached_value", None),
        ],
    )
    def test_last_bundle_key_and_separate_argument(self, take: str, expected: str | None) -> None:
        """Only the last key of a bundle can reach a separate argument."""
        tokenizer = Tokenizer(["-abc", "x"])
        assert tokenizer.next() == Token("a", KEY)
        assert tokenizer.next() == Token("b", KEY)
        assert tokenizer.next() == Token("c", KEY)
        assert getattr(tokenizer, take)() == expected

    def test_empty_attached_value_is_dropped(self) -> None:
        """"-k=" has nothing attached."""
        tokenizer = Tokenizer(["-k="])
        assert tokenizer.next() == Token("k", KEY)
        assert tokenizer.take_attached_value() is None
        assert not tokenizer.has_more


class TestLongKeys:
    """Double-hyphen keys."""

    @pytest.mark.parametrize(
        "args",
        [
            ["--foo", "bar"],
            ["--foo=bar"],
        ],
    )
    def test_key_value_forms(self, args: list[str]) -> None:
        """"--foo bar" and "--foo=bar" are equivalent."""
        tokenizer = Tokenizer(args)
        assert tokenizer.next() == Token("foo", KEY)
        assert tokenizer.take_value() == "bar"
        assert tokenizer.next() is None

    def test_undelimited_is_one_key(self) -> None:
        """"--foobar" is a single key."""
        tokenizer = Tokenizer(["--foobar"])
        assert tokenizer.next() == Token("foobar", KEY)
        assert not tokenizer.has_more

    def test_hyphenated_key(self) -> None:
        """Words in a long key stay together."""
        assert classify(["--dry-run"]) == [("dry-run", KEY)]

    def test_value_split_on_first_equals(self) -> None:
        """Only the first equal sign separates key and value."""
        tokenizer = Tokenizer(["--define=a=b"])
        assert tokenizer.next() == Token("define", KEY)
        assert tokenizer.take_value() == "a=b"

    @pytest.mark.parametrize("arg", ["--x", "--x=1", "---"])
    def test_single_character_long_key(self, arg: str) -> None:
        """A double hyphen must introduce at least two characters."""
        tokenizer = Tokenizer([arg])
        with pytest.raises(MalformedArguments, match="multi-character key"):
            tokenizer.next()


class TestTakeValue:
    """Retrieving the value of a reported key."""

    def test_next_key_is_not_a_value(self) -> None:
        """A following key is never taken as a value."""
        tokenizer = Tokenizer(["-k", "-v"])
        assert tokenizer.next() == Token("k", KEY)
        assert tokenizer.take_value() is None
        assert tokenizer.next() == Token("v", KEY)

    def test_exhausted(self) -> None:
        """No value is left after the last argument."""
        tokenizer = Tokenizer(["-k"])
        tokenizer.next()
        assert tokenizer.take_value() is None

    def test_has_more_tracks_queue(self) -> None:
        """has_more reflects the arguments left after each call."""
        tokenizer = Tokenizer(["-k", "v"])
        tokenizer.next()
        assert tokenizer.has_more
        tokenizer.take_value()
        assert not tokenizer.has_more


class TestTakeAttachedValue:
    """Retrieving only values attached to the key."""

    def test_separate_argument_is_not_taken(self) -> None:
        """"-e value" leaves "value" as a positional."""
        tokenizer = Tokenizer(["-e", "value"])
        assert tokenizer.next() == Token("e", KEY)
        assert tokenizer.take_attached_value() is None
        assert tokenizer.next() == Token("value", VALUE)

    @pytest.mark.parametrize(
        ("args", "key"),
        [
            (["-eAES"], "e"),
            (["-e=AES"], "e"),
            (["--encrypt=AES"], "encrypt"),
        ],
    )
    def test_attached_value_is_taken(self, args: list[str], key: str) -> None:
        """Bundled and "="-attached values are taken."""
        tokenizer = Tokenizer(args)
        assert tokenizer.next() == Token(key, KEY)
        assert tokenizer.take_attached_value() == "AES"

    def test_long_key_separate_argument(self) -> None:
        """"--encrypt AES" does not attach "AES"."""
        tokenizer = Tokenizer(["--encrypt", "AES"])
        tokenizer.next()
        assert tokenizer.take_attached_value() is None

    def test_unclaimed_attachment_stays_pending(self) -> None:
        """An unclaimed "=" value leaves later keys able to take an attached value."""
        tokenizer = Tokenizer(["--foo=-x", "sep"])
        assert tokenizer.next() == Token("foo", KEY)
        assert tokenizer.next() == Token("x", KEY)
        assert tokenizer.take_attached_value() == "sep"
        assert tokenizer.next() is None

    def test_bundle_char_taken_as_value(self) -> None:
        """Inside a bundle the remaining characters are the attached value."""
        tokenizer = Tokenizer(["-ab=x"])
        tokenizer.next()
        assert tokenizer.take_attached_value() == "b"
        assert tokenizer.next() == Token("x", VALUE)


class TestEndOfOptions:
    """The "--" marker."""

    def test_marker_itself_is_silent(self) -> None:
        """"--" then "-x" reports "-x" as a value."""
        assert classify(["--", "-x"]) == [("-x", VALUE)]

    def test_everything_after_is_verbatim(self) -> None:
        """Keys and "=" are not interpreted after the marker."""
        assert classify(["-a", "--", "-bc", "--foo=bar", "--"]) == [
            ("a", KEY),
            ("-bc", VALUE),
            ("--foo=bar", VALUE),
            ("--", VALUE),
        ]

    def test_trailing_marker(self) -> None:
        """A trailing "--" produces no token."""
        tokenizer = Tokenizer(["a", "--"])
        assert tokenizer.next() == Token("a", VALUE)
        assert tokenizer.has_more
        assert tokenizer.next() is None
        assert not tokenizer.has_more

    def test_marker_only(self) -> None:
        """A lone "--" yields nothing."""
        assert classify(["--"]) == []

    def test_expecting_keys_cleared(self) -> None:
        """The marker switches the tokenizer to values only."""
        tokenizer = Tokenizer(["--", "x"])
        assert tokenizer.expecting_keys
        tokenizer.next()
        assert not tokenizer.expecting_keys


class TestIO:
    """The lone "-" marker."""

    def test_trailing_hyphen_is_io(self) -> None:
        """A final "-" is reported as IO without text."""
        assert classify(["input", "-"]) == [("input", VALUE), (None, IO)]

    def test_io_sets_flags(self) -> None:
        """IO ends key processing."""
        tokenizer = Tokenizer(["-"])
        assert tokenizer.next() == Token(None, IO)
        assert tokenizer.expecting_io
        assert not tokenizer.expecting_keys
        assert tokenizer.next() is None

    def test_io_after_end_of_options(self) -> None:
        """"-" keeps its meaning after "--"."""
        assert classify(["--", "-"]) == [(None, IO)]

    @pytest.mark.parametrize(
        "args",
        [
            ["-", "x"],
            ["-", "-"],
            ["--", "-", "x"],
            ["-k=-", "x"],
        ],
    )
    def test_arguments_after_io(self, args: list[str]) -> None:
        """Nothing may follow a lone "-"."""
        tokenizer = Tokenizer(args)
        with pytest.raises(MalformedArguments, match="after hyphen"):
            list(tokenizer)

    def test_error_is_value_error(self) -> None:
        """MalformedArguments is a ValueError."""
        with pytest.raises(ValueError):
            list(Tokenizer(["-", "x"]))


class TestIteration:
    """Pull iteration and exhaustion."""

    def test_exhausted_stays_exhausted(self) -> None:
        """next() keeps returning None after the end."""
        tokenizer = Tokenizer(["a"])
        tokenizer.next()
        assert tokenizer.next() is None
        assert tokenizer.next() is None

    def test_not_restartable(self) -> None:
        """A tokenizer is its own iterator and is consumed once."""
        tokenizer = Tokenizer(["a", "b"])
        assert iter(tokenizer) is tokenizer
        assert len(list(tokenizer)) == 2
        assert list(tokenizer) == []

    def test_take_value_between_iterations(self) -> None:
        """Values can be pulled inside a for loop."""
        tokenizer = Tokenizer(["-o", "out.txt", "in.txt"])
        seen = []
        for token in tokenizer:
            if token.kind is KEY:
                seen.append((token.text, tokenizer.take_value()))
            else:
                seen.append((token.text, None))
        assert seen == [("o", "out.txt"), ("in.txt", None)]

    def test_independent_instances(self) -> None:
        """Tokenizers share no state."""
        first = Tokenizer(["--", "-a"])
        second = Tokenizer(["-a"])
        first.next()
        assert second.next() == Token("a", KEY)

    def test_input_is_copied(self) -> None:
        """The caller's list is not consumed."""
        args = ["-abc", "x"]
        list(Tokenizer(args))
        assert args == ["-abc", "x"]

    def test_kinds_are_not_strings(self) -> None:
        """Classifications compare as enum members only."""
        token = Tokenizer(["key"]).next()
        assert token.kind is VALUE
        assert token.kind != "value"


class TestFullVector:
    """A realistic mix of everything."""

    def test_mixed_vector(self) -> None:
        """Keys, values and IO interleave correctly."""
        tokenizer = Tokenizer(["-vo", "out.txt", "-eAES", "--level=3", "input", "-"])
        events = []
        for token in tokenizer:
            value = None
            if token.text in ("o", "level"):
                value = tokenizer.take_value()
            elif token.text == "e":
                value = tokenizer.take_attached_value()
            events.append((token.kind, token.text, value))

        assert events == [
            (KEY, "v", None),
            (KEY, "o", "out.txt"),
            (KEY, "e", "AES"),
            (KEY, "level", "3"),
            (VALUE, "input", None),
            (IO, None, None),
        ]
