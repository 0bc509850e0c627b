"""A printf that understands only %d, %l, %x, %p, %s, %c and %%."""

import sys

_DIGITS = "0123456789ABCDEF"
_U32 = (1 << 32) - 1
_U64 = (1 << 64) - 1


def _to_int32(value):
    value &= _U32
    return value - (1 << 32) if value & (1 << 31) else value


def _char(value):
    if isinstance(value, str):
        return value[:1]
    return chr(value & 0xFF)


def format_string(fmt, *args):
    """Render fmt with args; unknown conversions are printed as they are."""
    values = iter(args)

    def take():
        try:
            return next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    out = []
    pending = False
    for c in fmt:
        if not pending:
            if c == "%":
                pending = True
            else:
                out.append(c)
            continue
        pending = False
        if c == "d":
            out.append(str(_to_int32(take())))
        elif c == "l":
            out.append(str(take() & _U32))
        elif c == "x":
            out.append(format(take() & _U32, "X"))
        elif c == "p":
            out.append("0x" + format(take() & _U64, "016X"))
        elif c == "s":
            s = take()
            out.append("(null)" if s is None else str(s))
        elif c == "c":
            out.append(_char(take()))
        elif c == "%":
            out.append("%")
        else:
            out.append("%" + c)
    return "".join(out)


def fprintf(stream, fmt, *args):
    """Write the formatted text to a text stream."""
    stream.write(format_string(fmt, *args))


def printf(fmt, *args):
    """Write the formatted text to standard output."""
    fprintf(sys.stdout, fmt, *args)