import pickle
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

import pytest

from err_ctx.context import Context, Message, into_error, wrap


@dataclass
class Operation:
    """Structured context value."""

    verb: str
    target: str

    def __str__(self):
        return f"{self.verb} {self.target}"


class TestContext:
    def test_display_is_context_then_cause(self):
        """Test that display is exactly '<context>: <cause>'."""
        err = Context("bar", Message("foo"))
        assert str(err) == "bar: foo"

    def test_wrap_string_error(self):
        """Test wrapping a string-constructed error."""
        assert str(wrap("foo", "bar")) == "bar: foo"

    def test_no_extra_whitespace(self):
        """Test that no padding is added around either side."""
        err = wrap(ValueError(" spaced "), "ctx ")
        assert str(err) == "ctx :  spaced "

    def test_source_returns_cause(self):
        """Test that the cause lookup always points at the wrapped error."""
        cause = ValueError("invalid digit")
        err = wrap(cause, "parsing port")
        assert err.source is cause
        assert err.cause is cause
        assert err.__cause__ is cause
        assert str(err.source) == "invalid digit"

    def test_nested_display(self):
        """Test that wrapping twice renders every layer outermost first."""
        err = wrap(wrap(OSError("disk full"), "writing log"), "flushing buffers")
        assert str(err) == "flushing buffers: writing log: disk full"
        assert str(err.source) == "writing log: disk full"
        assert str(err.source.source) == "disk full"

    def test_structured_context(self):
        """Test that non-string context values keep their type."""
        op = Operation("reading", "foo.txt")
        err = wrap(KeyError("x"), op)
        assert err.context is op
        assert str(err) == "reading foo.txt: 'x'"

    def test_repr_shows_context_and_source(self):
        """Test the debug rendering."""
        err = wrap("foo", "bar")
        assert repr(err) == "Context(context='bar', source=Message('foo'))"

    def test_immutable(self):
        """Test that context and cause cannot be reassigned."""
        err = wrap("foo", "bar")
        with pytest.raises(AttributeError):
            err.context = "baz"
        with pytest.raises(AttributeError):
            err.cause = Message("qux")

    def test_rejects_non_exception_cause(self):
        """Test that a non-exception cause is a programming error."""
        with pytest.raises(TypeError):
            Context("bar", "foo")

    def test_is_catchable_as_exception(self):
        """Test that a Context raises and catches like any other error."""
        with pytest.raises(Context, match="^bar: foo$"):
            raise wrap("foo", "bar")

    def test_nonexistent_file(self, tmp_path):
        """Test wrapping a real I/O failure; only the prefix is platform independent."""
        try:
            (tmp_path / "foo.txt").read_bytes()
        except OSError as e:
            err = wrap(e, "reading foo.txt")
        assert str(err).startswith("reading foo.txt: ")
        assert isinstance(err.source, FileNotFoundError)

    def test_pickle_round_trip(self):
        """Test that a Context can cross a process boundary."""
        err = wrap(wrap(ValueError("bad"), "inner"), "outer")
        restored = pickle.loads(pickle.dumps(err))
        assert str(restored) == "outer: inner: bad"
        assert restored.context == "outer"
        assert restored.__cause__ is restored.source

    def test_transfer_between_threads(self):
        """Test that a Context raised in a worker is reported by the caller."""

        def work():
            raise wrap(ValueError("bad input"), "worker failed")

        with ThreadPoolExecutor(max_workers=1) as pool:
            future = pool.submit(work)
            with pytest.raises(Context) as excinfo:
                future.result()
        assert str(excinfo.value) == "worker failed: bad input"


class TestIntoError:
    def test_exception_is_unchanged(self):
        err = RuntimeError("boom")
        assert into_error(err) is err

    def test_string_becomes_message(self):
        err = into_error("boom")
        assert isinstance(err, Message)
        assert str(err) == "boom"

    @pytest.mark.parametrize("value", [42, None, b"bytes", ["list"]])
    def test_other_values_rejected(self, value):
        """Test that values which cannot act as errors are rejected."""
        with pytest.raises(TypeError, match="cannot be used as an error cause"):
            into_error(value)

    def test_wrap_rejects_bad_error(self):
        with pytest.raises(TypeError):
            wrap(404, "fetching page")
