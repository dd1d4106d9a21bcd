import os, logging
from .backends import DefaultBackend
from .errors import InvalidConfiguration
from .groups import SRPGroup
from .hashes import sha256_digest, sha256_hmac
from .util import size_bytes

logger = logging.getLogger(__name__)

# The private values a and b must be fresh for every session and must not be
# small: anything with fewer than half the bits of N is thrown away and drawn
# again. The generators are called as generator(params) and return a backend
# number.

class RandomPrivateValue:
    def __init__(self, entropy_f=os.urandom):
        self.entropy_f = entropy_f

    def __call__(self, params):
        be = params.backend
        min_bits = params.N_size_bits // 2
        while True:
            value = be.random_below(params.N, self.entropy_f)
            if be.bit_length(value) >= min_bits:
                return value

class FixedPrivateValue:
    """Always returns the same private value. This is only useful for
    reproducing published test vectors: using it for real sessions makes
    every session share the same a (or b)."""
    def __init__(self, value):
        if isinstance(value, bytes):
            value = int.from_bytes(value, "big")
        self.value = value

    def __call__(self, params):
        return params.backend.from_int(self.value)

class Params:
    def __init__(self, group, digest=sha256_digest, hmac=sha256_hmac,
                 client_private_value=None, server_private_value=None,
                 backend=DefaultBackend):
        if not isinstance(group, SRPGroup):
            raise InvalidConfiguration("group must be an SRPGroup, not %r"
                                       % (group,))
        N, g = group.N, group.g
        if not isinstance(N, int) or N <= 3 or N % 2 == 0:
            raise InvalidConfiguration("N must be an odd integer > 3")
        if not isinstance(g, int) or not 1 < g < N:
            raise InvalidConfiguration("g must lie strictly between 1 and N")
        if client_private_value is None:
            client_private_value = RandomPrivateValue()
        if server_private_value is None:
            server_private_value = RandomPrivateValue()
        for name, f in [("digest", digest), ("hmac", hmac),
                        ("client_private_value", client_private_value),
                        ("server_private_value", server_private_value)]:
            if not callable(f):
                raise InvalidConfiguration("%s must be callable" % name)
        if backend is None:
            raise InvalidConfiguration("a big-integer backend is required")

        self.group = group
        self.digest = digest
        self.hmac = hmac
        self.client_private_value = client_private_value
        self.server_private_value = server_private_value
        self.backend = backend

        self.N = backend.from_int(N)
        self.g = backend.from_int(g)
        self.N_size_bits = group.size_bits
        # every hash input is padded to this many bytes
        self.pad_length = size_bytes(N)
        logger.debug("SRP params: %d-bit group, g=%d, %s backend",
                     self.N_size_bits, g, backend.name)
