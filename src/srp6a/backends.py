import os
from Crypto.Math.Numbers import Integer
from .errors import InvalidEncoding
from .util import bytes_to_number, number_to_bytes, unbiased_randrange

"""Interface specification for a big-integer Backend.

SRP does all of its arithmetic on non-negative integers modulo a large safe
prime N. The protocol code never constructs or serializes numbers itself: it
asks a backend to do that, and then combines the backend's numbers with the
ordinary operators. A backend therefore provides:

* numbers that support +, -, *, %, == and ordering, both among themselves
  and against plain python ints
* conversion from and to big-endian bytes (minimal length, zero is b"\\x00")
* conversion from and to python ints
* the bit length of a number (0 for zero)
* modular exponentiation
* a uniformly random number below some bound

The random-number function requires an entropy function, which is expected
to behave like os.urandom. The only reason to not use os.urandom is for
deterministic unit tests.

    be = IntBackend # or CryptodomeBackend

    n = be.from_bytes(bytes)
    bytes = be.to_bytes(n)
    n = be.from_int(i)
    i = be.to_int(n)
    bits = be.bit_length(n)
    n3 = be.powmod(n1, n2, modulus)
    n = be.random_below(bound, entropy_f)
"""

def _check_encoding(data):
    if not isinstance(data, bytes):
        raise InvalidEncoding("numbers are encoded as bytes, not %s"
                              % type(data).__name__)
    if not data:
        raise InvalidEncoding("empty byte string is not a number")

class _IntBackend:
    name = "int"

    def from_bytes(self, data):
        _check_encoding(data)
        return bytes_to_number(data)

    def to_bytes(self, n):
        return number_to_bytes(n)

    def from_int(self, i):
        return int(i)

    def to_int(self, n):
        return n

    def bit_length(self, n):
        return n.bit_length()

    def powmod(self, base, exp, modulus):
        return pow(base, exp, modulus)

    def random_below(self, bound, entropy_f=os.urandom):
        return unbiased_randrange(0, bound, entropy_f)

class _CryptodomeBackend:
    # Crypto.Math.Numbers picks GMP when libgmp can be loaded, and falls back
    # to its own pure-python integers otherwise
    name = "cryptodome"

    def _coerce(self, n):
        if isinstance(n, Integer):
            return n
        return Integer(int(n))

    def from_bytes(self, data):
        _check_encoding(data)
        return Integer.from_bytes(data)

    def to_bytes(self, n):
        n = self._coerce(n)
        if n < 0:
            raise ValueError("negative numbers have no encoding")
        if n == 0:
            return b"\x00"
        return n.to_bytes()

    def from_int(self, i):
        return Integer(int(i))

    def to_int(self, n):
        return int(n)

    def bit_length(self, n):
        n = self._coerce(n)
        if n == 0:
            return 0
        return n.size_in_bits()

    def powmod(self, base, exp, modulus):
        return pow(self._coerce(base), self._coerce(exp),
                   self._coerce(modulus))

    def random_below(self, bound, entropy_f=os.urandom):
        return Integer.random_range(min_inclusive=0,
                                    max_exclusive=int(bound),
                                    randfunc=entropy_f)

IntBackend = _IntBackend()
CryptodomeBackend = _CryptodomeBackend()

DefaultBackend = IntBackend
