import logging
from collections import namedtuple
from hmac import compare_digest
from .parameters.i2048 import Params2048
from .errors import (InvalidPublicValue, ZeroScramblingParameter,
                     EvidenceMismatch)
from .transcript import hash_pair, hash_triplet
from .util import pad

logger = logging.getLogger(__name__)

DefaultParams = Params2048

# N    A large safe prime (N = 2q+1, where q is prime)
#      All arithmetic is done modulo N.
# g    A generator modulo N
# k    Multiplier parameter, k = H(N, g)
# s    User's salt
# I    Username (identity)
# p    Cleartext password
# H()  One-way hash function, H(n1, n2..) hashes padded numbers
# u    Scrambling parameter, u = H(A, B)
# a,b  Secret ephemeral values
# A,B  Public ephemeral values
# x    Private key, x = H(s | H(I | ":" | p))
# v    Password verifier, v = g^x
#
# register: server stores {I, s, v}
# client -> server:  I, A = g^a
# server -> client:  s, B = kv + g^b
#   client:  S = (B - kg^x) ^ (a + ux)
#   server:  S = (Av^u) ^ b
# client -> server:  M1 = H(A, B, S)
# server -> client:  M2 = H(A, M1, S), only once M1 has been checked
#
# The client aborts if B == 0 (mod N) or u == 0. The server aborts if
# A == 0 (mod N) or u == 0, and never reveals M2 to a client whose M1 was
# wrong.
#
# Everything below is a pure function of its arguments: the caller holds on
# to a, b, x and S between steps.

ClientCredentials = namedtuple("ClientCredentials", ["x", "a", "A"])
ServerCredentials = namedtuple("ServerCredentials", ["b", "B"])
ClientSecret = namedtuple("ClientSecret", ["S", "M1"])
ServerSecret = namedtuple("ServerSecret", ["S", "M2"])

KEY_DIGEST = "digest"
KEY_HMAC = "hmac"

def compute_x(salt, identity, password, params=DefaultParams):
    assert isinstance(salt, bytes), repr(salt)
    assert isinstance(identity, bytes), repr(identity)
    assert isinstance(password, bytes)
    inner = params.digest(b"".join([identity, b":", password]))
    outer = params.digest(salt + inner)
    return params.backend.from_bytes(outer) % params.N

def compute_verifier(salt, identity, password, params=DefaultParams):
    x = compute_x(salt, identity, password, params)
    return params.backend.powmod(params.g, x, params.N)

def compute_k(params=DefaultParams):
    return hash_pair(params, params.N, params.g)

def compute_u(A, B, params=DefaultParams):
    return hash_pair(params, A, B)

def _validate_public_value(value, name, params):
    reduced = value % params.N
    if reduced == 0:
        logger.warning("rejecting public value %s: zero modulo N", name)
        raise InvalidPublicValue("%s is zero modulo N" % name)
    return reduced

def _scrambling_parameter(A, B, params):
    u = compute_u(A, B, params)
    if u == 0:
        logger.warning("rejecting session: scrambling parameter u is zero")
        raise ZeroScramblingParameter("u = H(A, B) is zero")
    return u

def _same_number(n1, n2, params):
    # compare padded encodings in constant time
    be = params.backend
    return compare_digest(pad(be.to_bytes(n1), params.pad_length),
                          pad(be.to_bytes(n2), params.pad_length))

def client_ephemeral(params=DefaultParams):
    a = params.client_private_value(params)
    A = params.backend.powmod(params.g, a, params.N)
    return a, A

def client_start(salt, identity, password, params=DefaultParams):
    x = compute_x(salt, identity, password, params)
    a, A = client_ephemeral(params)
    return ClientCredentials(x, a, A)

def server_start(v, params=DefaultParams):
    be = params.backend
    N = params.N
    k = compute_k(params)
    b = params.server_private_value(params)
    B = (k * v + be.powmod(params.g, b, N)) % N
    return ServerCredentials(b, B)

def calculate_client_secret(a, A, x, B, params=DefaultParams):
    be = params.backend
    N = params.N
    B = _validate_public_value(B, "B", params)
    u = _scrambling_parameter(A, B, params)
    k = compute_k(params)
    kgx = (k * be.powmod(params.g, x, N)) % N
    # B - kg^x, kept non-negative before the reduction
    base = (B + N - kgx) % N
    return be.powmod(base, a + u * x, N)

def calculate_server_secret(A, v, b, B, params=DefaultParams):
    be = params.backend
    N = params.N
    A = _validate_public_value(A, "A", params)
    u = _scrambling_parameter(A, B, params)
    return be.powmod((A * be.powmod(v, u, N)) % N, b, N)

def client_evidence(A, B, S, params=DefaultParams):
    return hash_triplet(params, A, B, S)

def server_evidence(A, M1, S, params=DefaultParams):
    return hash_triplet(params, A, M1, S)

def client_compute_secret_and_evidence(a, A, x, B, params=DefaultParams):
    B = _validate_public_value(B, "B", params)
    S = calculate_client_secret(a, A, x, B, params)
    M1 = client_evidence(A, B, S, params)
    return ClientSecret(S, M1)

def server_compute_secret_and_verify(A, v, b, B, M1, params=DefaultParams):
    """Compute the server's shared secret, check the client's evidence
    message M1 against it, and only then compute the server evidence M2.

    Raises InvalidPublicValue if A is zero modulo N and EvidenceMismatch if
    M1 is wrong. In both cases nothing is returned, so a client that has not
    proven knowledge of the password never sees M2."""
    A = _validate_public_value(A, "A", params)
    S = calculate_server_secret(A, v, b, B, params)
    expected_M1 = client_evidence(A, B, S, params)
    if not _same_number(M1, expected_M1, params):
        logger.error("client evidence does not match, aborting session")
        raise EvidenceMismatch("client evidence message M1 does not match")
    M2 = server_evidence(A, M1, S, params)
    return ServerSecret(S, M2)

def client_verify_server_evidence(M2, expected_M2, params=DefaultParams):
    if _same_number(M2, expected_M2, params):
        return True
    logger.error("server evidence does not match")
    return False

def derive_session_key_digest(S, params=DefaultParams):
    # K = H(pad(S))
    return params.digest(pad(params.backend.to_bytes(S), params.pad_length))

def derive_session_key_hmac(S, salt, params=DefaultParams):
    # K = HMAC(salt, S), S in its minimal encoding
    assert isinstance(salt, bytes), repr(salt)
    return params.hmac(salt, params.backend.to_bytes(S))

def derive_session_key(S, params=DefaultParams, mode=KEY_DIGEST, salt=None):
    if mode == KEY_DIGEST:
        return derive_session_key_digest(S, params)
    if mode == KEY_HMAC:
        if salt is None:
            raise ValueError("the hmac key mode needs the salt")
        return derive_session_key_hmac(S, salt, params)
    raise ValueError("unknown session key mode %r" % (mode,))
