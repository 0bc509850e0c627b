"""A minimal assertion library that reports each check as it runs."""

import inspect

from .printf import format_string, printf

RHSTRING_MAX = 256
LARGE_STRINGLEN = 8192
RH_MAX_TEST_CASES = 1024

_U32 = (1 << 32) - 1


class RhAssertionError(AssertionError):
    """Raised when an rhassert check fails."""


class RhString:
    """A growable string that tracks its length and reserved size."""

    def __init__(self):
        self.size = RHSTRING_MAX
        self._text = ""

    @property
    def length(self):
        """Number of characters held."""
        return len(self._text)

    @property
    def text(self):
        """The characters held."""
        return self._text

    def __str__(self):
        return self._text

    def __len__(self):
        return len(self._text)

    def append(self, text):
        """Append text, growing the reserved size when it would run out."""
        if text is None:
            return
        needed = self.length + len(text) + 1
        if needed >= self.size:
            self.resize(needed + RHSTRING_MAX)
        self._text += text

    def append_char(self, ch):
        """Append a single character."""
        self.append(ch[:1])

    def resize(self, new_size):
        """Set the reserved size; it must leave room for the text and a terminator."""
        if new_size <= self.length:
            raise ValueError(
                f"size {new_size} cannot hold {self.length} characters"
            )
        self.size = new_size


def _to_int32(value):
    value &= _U32
    return value - (1 << 32) if value & (1 << 31) else value


def _report(ok, detail=""):
    frame = inspect.currentframe().f_back.f_back
    func, line = frame.f_code.co_name, frame.f_lineno
    del frame
    if ok:
        printf("%s(%d): OK.\n", func, line)
        return
    message = format_string("%s(%d): Assertion FAILED%s", func, line, detail)
    printf("%s\n", message)
    raise RhAssertionError(message)


def rhassert(exp):
    """Check that exp is true."""
    _report(bool(exp))


def rhassert_int_equals(actual, expected):
    """Check that two values are equal as 32-bit integers."""
    _report(
        _to_int32(actual) == _to_int32(expected),
        format_string(": actual = %d, expected = %d", actual, expected),
    )


def rhassert_ptr_equals(actual, expected):
    """Check that two references name the same object."""
    _report(
        actual is expected,
        format_string(": actual = %p, expected = %p", id(actual), id(expected)),
    )


def rhassert_str_equals(actual, expected):
    """Check that two strings are equal, or that both are None."""
    ok = (actual is None and expected is None) or (
        actual is not None and expected is not None and actual == expected
    )
    _report(ok, format_string(": actual = %s, expected = %s", actual, expected))