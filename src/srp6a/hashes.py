import hashlib
from hkdf import hkdf_extract
from .errors import InvalidConfiguration

# A digest function maps bytes to a fixed-length byte string. An hmac
# function takes (key, message) and does the same. Params() accepts any
# callables with these shapes; the ones below cover the common choices.
#
# HKDF-Extract is defined as HMAC-Hash(salt, IKM), so hkdf_extract() gives
# us a plain HMAC. An empty key is replaced by HashLen zero bytes there,
# which HMAC treats the same as an empty key.

def sha1_digest(data):
    return hashlib.sha1(data).digest()

def sha256_digest(data):
    return hashlib.sha256(data).digest()

def sha512_digest(data):
    return hashlib.sha512(data).digest()

def sha1_hmac(key, data):
    return hkdf_extract(key, data, hash=hashlib.sha1)

def sha256_hmac(key, data):
    return hkdf_extract(key, data, hash=hashlib.sha256)

def sha512_hmac(key, data):
    return hkdf_extract(key, data, hash=hashlib.sha512)

HASH_FUNCTIONS = {
    "sha1": (sha1_digest, sha1_hmac),
    "sha256": (sha256_digest, sha256_hmac),
    "sha512": (sha512_digest, sha512_hmac),
    }

def get_hash_functions(name):
    """Return the (digest, hmac) pair registered under 'name'."""
    try:
        return HASH_FUNCTIONS[name]
    except KeyError:
        raise InvalidConfiguration("unknown hash algorithm %r" % (name,))
