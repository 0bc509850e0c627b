"""The Park-Miller minimal standard pseudo-random generator."""

_U64 = (1 << 64) - 1


def do_rand(ctx):
    """Return the next value after state ctx; the value is also the new state."""
    x = (ctx & _U64) % 0x7FFFFFFE + 1
    hi, lo = divmod(x, 127773)
    x = 16807 * lo - 2836 * hi
    if x < 0:
        x += 0x7FFFFFFF
    return x - 1


class ParkMiller:
    """A generator holding its own state."""

    def __init__(self, seed=1):
        self.state = seed & _U64

    def next(self):
        """Advance the state and return the new value."""
        self.state = do_rand(self.state)
        return self.state

    def __iter__(self):
        while True:
            yield self.next()