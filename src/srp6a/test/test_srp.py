import unittest
from unittest import mock
from hashlib import sha256
from srp6a import srp
from srp6a.params import Params, RandomPrivateValue, FixedPrivateValue
from srp6a.groups import G1024
from srp6a.backends import IntBackend, CryptodomeBackend
from srp6a.parameters.i1024 import Params1024
from srp6a.errors import (InvalidPublicValue, ZeroScramblingParameter,
                          EvidenceMismatch)
from .common import PRG

SALT = b"\x01\x02\x03\x04salt"
I = b"alice"
PW = b"password"

def _register(params, salt=SALT, identity=I, password=PW):
    return srp.compute_verifier(salt, identity, password, params)

class _Handshake:
    """Run the engine functions in order, the way a caller would."""
    backend = None # set by the subclass

    def setUp(self):
        self.params = Params(G1024,
                             client_private_value=RandomPrivateValue(PRG(b"A")),
                             server_private_value=RandomPrivateValue(PRG(b"B")),
                             backend=self.backend)

    def test_success(self):
        p = self.params
        v = _register(p)
        x, a, A = srp.client_start(SALT, I, PW, p)
        b, B = srp.server_start(v, p)
        S1, M1 = srp.client_compute_secret_and_evidence(a, A, x, B, p)
        S2, M2 = srp.server_compute_secret_and_verify(A, v, b, B, M1, p)
        self.assertEqual(S1, S2)
        expected_M2 = srp.server_evidence(A, M1, S1, p)
        self.assertTrue(srp.client_verify_server_evidence(M2, expected_M2, p))

        K1 = srp.derive_session_key(S1, p)
        K2 = srp.derive_session_key(S2, p)
        self.assertEqual(K1, K2)
        self.assertEqual(len(K1), len(sha256().digest()))
        K1 = srp.derive_session_key(S1, p, mode=srp.KEY_HMAC, salt=SALT)
        K2 = srp.derive_session_key_hmac(S2, SALT, p)
        self.assertEqual(K1, K2)

    def test_verifier_is_g_to_the_x(self):
        p = self.params
        be = self.backend
        x = srp.compute_x(SALT, I, PW, p)
        expected = int.from_bytes(
            sha256(SALT + sha256(I + b":" + PW).digest()).digest(), "big")
        self.assertEqual(be.to_int(x), expected % G1024.N)
        self.assertEqual(be.to_int(_register(p)),
                         pow(G1024.g, expected % G1024.N, G1024.N))

    def test_wrong_password(self):
        p = self.params
        v = _register(p)
        x, a, A = srp.client_start(SALT, I, b"passwerd", p)
        b, B = srp.server_start(v, p)
        S1, M1 = srp.client_compute_secret_and_evidence(a, A, x, B, p)
        self.assertRaises(EvidenceMismatch,
                          srp.server_compute_secret_and_verify,
                          A, v, b, B, M1, p)

    def test_wrong_identity(self):
        p = self.params
        v = _register(p)
        x, a, A = srp.client_start(SALT, b"bob", PW, p)
        b, B = srp.server_start(v, p)
        S1, M1 = srp.client_compute_secret_and_evidence(a, A, x, B, p)
        self.assertRaises(EvidenceMismatch,
                          srp.server_compute_secret_and_verify,
                          A, v, b, B, M1, p)

    def test_tampered_salt(self):
        p = self.params
        v = _register(p)
        bad_salt = bytes([SALT[0] ^ 0x01]) + SALT[1:]
        x, a, A = srp.client_start(bad_salt, I, PW, p)
        b, B = srp.server_start(v, p)
        S1, M1 = srp.client_compute_secret_and_evidence(a, A, x, B, p)
        self.assertRaises(EvidenceMismatch,
                          srp.server_compute_secret_and_verify,
                          A, v, b, B, M1, p)

    def test_tampered_A(self):
        p = self.params
        v = _register(p)
        x, a, A = srp.client_start(SALT, I, PW, p)
        b, B = srp.server_start(v, p)
        S1, M1 = srp.client_compute_secret_and_evidence(a, A, x, B, p)
        # flip a bit in the last byte of A on its way to the server
        be = self.backend
        A_bytes = be.to_bytes(A)
        bad_A = be.from_bytes(A_bytes[:-1] + bytes([A_bytes[-1] ^ 0x01]))
        self.assertRaises(EvidenceMismatch,
                          srp.server_compute_secret_and_verify,
                          bad_A, v, b, B, M1, p)

    def test_tampered_B(self):
        p = self.params
        v = _register(p)
        x, a, A = srp.client_start(SALT, I, PW, p)
        b, B = srp.server_start(v, p)
        be = self.backend
        B_bytes = be.to_bytes(B)
        bad_B = be.from_bytes(bytes([B_bytes[0] ^ 0x01]) + B_bytes[1:])
        S1, M1 = srp.client_compute_secret_and_evidence(a, A, x, bad_B, p)
        self.assertRaises(EvidenceMismatch,
                          srp.server_compute_secret_and_verify,
                          A, v, b, B, M1, p)

    def test_tampered_S(self):
        p = self.params
        v = _register(p)
        x, a, A = srp.client_start(SALT, I, PW, p)
        b, B = srp.server_start(v, p)
        S1, M1 = srp.client_compute_secret_and_evidence(a, A, x, B, p)
        bad_M1 = srp.client_evidence(A, B, S1 + 1, p)
        self.assertRaises(EvidenceMismatch,
                          srp.server_compute_secret_and_verify,
                          A, v, b, B, bad_M1, p)

    def test_tampered_M2(self):
        p = self.params
        v = _register(p)
        x, a, A = srp.client_start(SALT, I, PW, p)
        b, B = srp.server_start(v, p)
        S1, M1 = srp.client_compute_secret_and_evidence(a, A, x, B, p)
        S2, M2 = srp.server_compute_secret_and_verify(A, v, b, B, M1, p)
        expected_M2 = srp.server_evidence(A, M1, S1, p)
        self.assertFalse(srp.client_verify_server_evidence(M2 + 1,
                                                           expected_M2, p))

    def test_zero_A(self):
        p = self.params
        be = self.backend
        v = _register(p)
        b, B = srp.server_start(v, p)
        for bad_A in [be.from_int(0), p.N, p.N * 2]:
            self.assertRaises(InvalidPublicValue,
                              srp.server_compute_secret_and_verify,
                              bad_A, v, b, B, be.from_int(1), p)
            self.assertRaises(InvalidPublicValue,
                              srp.calculate_server_secret,
                              bad_A, v, b, B, p)

    def test_zero_B(self):
        p = self.params
        be = self.backend
        x, a, A = srp.client_start(SALT, I, PW, p)
        for bad_B in [be.from_int(0), p.N, p.N * 3]:
            self.assertRaises(InvalidPublicValue,
                              srp.client_compute_secret_and_evidence,
                              a, A, x, bad_B, p)
            self.assertRaises(InvalidPublicValue,
                              srp.calculate_client_secret,
                              a, A, x, bad_B, p)

    def test_unreduced_B(self):
        # B + N is the same public value and gives the same session
        p = self.params
        v = _register(p)
        x, a, A = srp.client_start(SALT, I, PW, p)
        b, B = srp.server_start(v, p)
        S1, M1 = srp.client_compute_secret_and_evidence(a, A, x, B + p.N, p)
        S2, M2 = srp.server_compute_secret_and_verify(A, v, b, B, M1, p)
        self.assertEqual(S1, S2)

    def test_zero_u(self):
        p = self.params
        be = self.backend
        v = _register(p)
        x, a, A = srp.client_start(SALT, I, PW, p)
        b, B = srp.server_start(v, p)
        with mock.patch("srp6a.srp.compute_u", return_value=be.from_int(0)):
            self.assertRaises(ZeroScramblingParameter,
                              srp.client_compute_secret_and_evidence,
                              a, A, x, B, p)
            self.assertRaises(ZeroScramblingParameter,
                              srp.server_compute_secret_and_verify,
                              A, v, b, B, be.from_int(1), p)

class HandshakeInt(_Handshake, unittest.TestCase):
    backend = IntBackend

class HandshakeCryptodome(_Handshake, unittest.TestCase):
    backend = CryptodomeBackend

class BackendsAgree(unittest.TestCase):
    def test_same_values(self):
        a = 0x5eed * 2**600 + 1
        b = 0xbeef * 2**600 + 3
        results = []
        for backend in [IntBackend, CryptodomeBackend]:
            p = Params(G1024,
                       client_private_value=FixedPrivateValue(a),
                       server_private_value=FixedPrivateValue(b),
                       backend=backend)
            v = _register(p)
            x, a_, A = srp.client_start(SALT, I, PW, p)
            b_, B = srp.server_start(v, p)
            S, M1 = srp.client_compute_secret_and_evidence(a_, A, x, B, p)
            S2, M2 = srp.server_compute_secret_and_verify(A, v, b_, B, M1, p)
            K = srp.derive_session_key(S, p)
            results.append([backend.to_int(n)
                            for n in [v, x, A, B, S, M1, M2]] + [K])
        self.assertEqual(results[0], results[1])

class Ordering(unittest.TestCase):
    """The server must not compute its evidence for a client that failed."""
    def setUp(self):
        p = self.params = Params1024
        self.v = _register(p)
        self.x, self.a, self.A = srp.client_start(SALT, I, PW, p)
        self.b, self.B = srp.server_start(self.v, p)

    def test_no_M2_on_mismatch(self):
        p = self.params
        with mock.patch("srp6a.srp.server_evidence") as server_evidence:
            self.assertRaises(EvidenceMismatch,
                              srp.server_compute_secret_and_verify,
                              self.A, self.v, self.b, self.B, 12345, p)
            server_evidence.assert_not_called()

    def test_no_secret_on_zero_A(self):
        p = self.params
        with mock.patch("srp6a.srp.calculate_server_secret") as secret, \
             mock.patch("srp6a.srp.server_evidence") as server_evidence:
            self.assertRaises(InvalidPublicValue,
                              srp.server_compute_secret_and_verify,
                              0, self.v, self.b, self.B, 1, p)
            secret.assert_not_called()
            server_evidence.assert_not_called()

    def test_no_secret_on_zero_B(self):
        p = self.params
        with mock.patch("srp6a.srp.calculate_client_secret") as secret:
            self.assertRaises(InvalidPublicValue,
                              srp.client_compute_secret_and_evidence,
                              self.a, self.A, self.x, p.N, p)
            secret.assert_not_called()

    def test_M2_after_success(self):
        p = self.params
        S, M1 = srp.client_compute_secret_and_evidence(self.a, self.A, self.x,
                                                       self.B, p)
        with mock.patch("srp6a.srp.server_evidence",
                        wraps=srp.server_evidence) as server_evidence:
            srp.server_compute_secret_and_verify(self.A, self.v, self.b,
                                                 self.B, M1, p)
            server_evidence.assert_called_once_with(self.A, M1, S, p)

class SessionKeys(unittest.TestCase):
    def test_modes(self):
        p = Params1024
        S = 0x1234
        self.assertEqual(srp.derive_session_key(S, p),
                         sha256(S.to_bytes(128, "big")).digest())
        self.assertEqual(srp.derive_session_key_digest(S, p),
                         srp.derive_session_key(S, p, mode=srp.KEY_DIGEST))
        self.assertEqual(srp.derive_session_key(S, p, mode=srp.KEY_HMAC,
                                                salt=b"salt"),
                         p.hmac(b"salt", b"\x12\x34"))
        self.assertNotEqual(srp.derive_session_key_hmac(S, b"salt", p),
                            srp.derive_session_key_hmac(S, b"pepper", p))

    def test_errors(self):
        p = Params1024
        self.assertRaises(ValueError, srp.derive_session_key, 5, p,
                          mode=srp.KEY_HMAC)
        self.assertRaises(ValueError, srp.derive_session_key, 5, p,
                          mode="sha1")

class Private(unittest.TestCase):
    def test_fresh_private_values(self):
        # with the default generator every session gets a new a and b
        p = Params1024
        v = _register(p)
        a_values = set(srp.client_start(SALT, I, PW, p).a for i in range(4))
        b_values = set(srp.server_start(v, p).b for i in range(4))
        self.assertEqual(len(a_values), 4)
        self.assertEqual(len(b_values), 4)

if __name__ == '__main__':
    unittest.main()
