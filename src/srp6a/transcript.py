from .util import pad

# Every number that goes into a hash is first padded to the byte length of
# N. Two implementations that disagree about this (or about the order of the
# operands) will compute different k, u and evidence messages, and every
# session between them fails.

def hash_padded(params, *numbers):
    be = params.backend
    transcript = b"".join([pad(be.to_bytes(n), params.pad_length)
                           for n in numbers])
    return be.from_bytes(params.digest(transcript)) % params.N

def hash_pair(params, n1, n2):
    # k = H(N, g), u = H(A, B)
    return hash_padded(params, n1, n2)

def hash_triplet(params, n1, n2, n3):
    # M1 = H(A, B, S), M2 = H(A, M1, S)
    return hash_padded(params, n1, n2, n3)
