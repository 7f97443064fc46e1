"""General helpers shared by the simulation classes."""

from __future__ import annotations


def nearest_int(vector: float, box_length: float) -> int:
    """Return ``vector / box_length`` rounded to the nearest integer, halves away from zero."""
    div = vector / box_length
    if vector >= 0:
        return int(div + 0.5)
    return -int(0.5 - div)


def _cmod(a: int, b: int) -> int:
    """Remainder with the sign of the dividend (truncating division)."""
    r = abs(a) % b
    return r if a >= 0 else -r


class PressRandom:
    """Shuffled combined linear congruential generator on the interval [0, 1).

    A negative seed (re)initialises the shuffle table on the next draw; after
    that the stored seed becomes 1 and the sequence simply continues.
    """

    _M1 = 259200
    _IA1 = 7141
    _IC1 = 54773
    _M2 = 134456
    _IA2 = 8121
    _IC2 = 28411
    _M3 = 243000
    _IA3 = 4561
    _IC3 = 51349
    _TABLE_SIZE = 97

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._table: list[float] = []
        self._ix1 = 0
        self._ix2 = 0
        self._ix3 = 0

    def reseed(self, seed: int) -> None:
        """Set a new seed; a negative one restarts the sequence on the next draw."""
        self.seed = seed

    def _initialise(self) -> None:
        rm1 = 1.0 / self._M1
        rm2 = 1.0 / self._M2
        ix1 = _cmod(self._IC1 - self.seed, self._M1)
        ix1 = _cmod(self._IA1 * ix1 + self._IC1, self._M1)
        ix2 = _cmod(ix1, self._M2)
        ix1 = _cmod(self._IA1 * ix1 + self._IC1, self._M1)
        ix3 = _cmod(ix1, self._M3)

        table = []
        for _ in range(self._TABLE_SIZE):
            ix1 = _cmod(self._IA1 * ix1 + self._IC1, self._M1)
            ix2 = _cmod(self._IA2 * ix2 + self._IC2, self._M2)
            table.append((ix1 + ix2 * rm2) * rm1)

        self._table = table
        self._ix1, self._ix2, self._ix3 = ix1, ix2, ix3
        self.seed = 1

    def random(self) -> float:
        """Return the next number of the sequence."""
        if self.seed < 0 or not self._table:
            self._initialise()

        rm1 = 1.0 / self._M1
        rm2 = 1.0 / self._M2
        self._ix1 = _cmod(self._IA1 * self._ix1 + self._IC1, self._M1)
        self._ix2 = _cmod(self._IA2 * self._ix2 + self._IC2, self._M2)
        self._ix3 = _cmod(self._IA3 * self._ix3 + self._IC3, self._M3)

        product = 96 * self._ix3
        j = abs(product) // self._M3
        if product < 0:
            j = -j
        if j > 96 or j < 0:
            raise RuntimeError("Error in random number generator")

        value = self._table[j]
        self._table[j] = (self._ix1 + self._ix2 * rm2) * rm1
        return value