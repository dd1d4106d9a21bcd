import os
from . import srp
from .srp import DefaultParams, KEY_DIGEST
from .errors import (OnlyCallStartOnce, OnlyCallFinishOnce, OutOfOrder,
                     NotAuthenticated, EvidenceMismatch)

# These classes each manage one side of one SRP session. They hold the
# ephemeral values between steps and talk in bytes: every number that goes
# out or comes in is a minimal big-endian string. Getting the bytes to the
# other side is up to the application.
#
#  registration:  salt, verifier = create_verifier(I, p)
#  client:        A_msg = c.start()                    -> send I, A_msg
#  server:        B_msg = s.start()                    -> send salt, B_msg
#  client:        M1_msg = c.process_challenge(salt, B_msg)
#  server:        M2_msg = s.verify_client(A_msg, M1_msg)
#  client:        c.verify_server(M2_msg)
#  both:          key = c.get_key() == s.get_key()
#
# A failure at any step finishes the object. Start over with new objects,
# which draw new private values.

def create_verifier(identity, password, salt=None, params=DefaultParams):
    if salt is None:
        salt = os.urandom(16)
    assert isinstance(salt, bytes), repr(salt)
    v = srp.compute_verifier(salt, identity, password, params)
    return salt, params.backend.to_bytes(v)

class _SRPSession:
    def __init__(self, params, key_mode):
        if key_mode not in (srp.KEY_DIGEST, srp.KEY_HMAC):
            raise ValueError("unknown session key mode %r" % (key_mode,))
        self.params = params
        self.key_mode = key_mode
        self._started = False
        self._finished = False
        self._key = None

    def _start_once(self):
        if self._started:
            raise OnlyCallStartOnce("start() can only be called once")
        self._started = True

    def _finish_once(self, name):
        if not self._started:
            raise OutOfOrder("call start() before %s()" % name)
        if self._finished:
            raise OnlyCallFinishOnce("%s() can only be called once" % name)
        self._finished = True

    def _derive_key(self, S, salt):
        return srp.derive_session_key(S, self.params, mode=self.key_mode,
                                      salt=salt)

    def get_key(self):
        if self._key is None:
            raise NotAuthenticated("the other side has not been verified")
        return self._key

class SRPClient(_SRPSession):
    def __init__(self, identity, password, params=DefaultParams,
                 key_mode=KEY_DIGEST):
        _SRPSession.__init__(self, params, key_mode)
        assert isinstance(identity, bytes), repr(identity)
        assert isinstance(password, bytes)
        self.identity = identity
        self.pw = password
        self._expected_M2 = None
        self._pending_key = None
        self._server_checked = False

    def start(self):
        self._start_once()
        self.a, self.A = srp.client_ephemeral(self.params)
        return self.params.backend.to_bytes(self.A)

    def process_challenge(self, salt, B_msg):
        self._finish_once("process_challenge")
        be = self.params.backend
        B = be.from_bytes(B_msg)
        x = srp.compute_x(salt, self.identity, self.pw, self.params)
        S, M1 = srp.client_compute_secret_and_evidence(self.a, self.A, x, B,
                                                       self.params)
        self._expected_M2 = srp.server_evidence(self.A, M1, S, self.params)
        self._pending_key = self._derive_key(S, salt)
        return be.to_bytes(M1)

    def verify_server(self, M2_msg):
        if self._server_checked:
            raise OnlyCallFinishOnce("verify_server() can only be called once")
        if self._expected_M2 is None:
            raise OutOfOrder("call process_challenge() before verify_server()")
        self._server_checked = True
        M2 = self.params.backend.from_bytes(M2_msg)
        expected_M2, self._expected_M2 = self._expected_M2, None
        pending_key, self._pending_key = self._pending_key, None
        if not srp.client_verify_server_evidence(M2, expected_M2,
                                                 self.params):
            raise EvidenceMismatch("server evidence message M2 does not "
                                   "match: the server does not know our "
                                   "verifier")
        self._key = pending_key

class SRPServer(_SRPSession):
    def __init__(self, salt, verifier, params=DefaultParams,
                 key_mode=KEY_DIGEST):
        _SRPSession.__init__(self, params, key_mode)
        assert isinstance(salt, bytes), repr(salt)
        self.salt = salt
        self.v = params.backend.from_bytes(verifier)

    def start(self):
        self._start_once()
        self.b, self.B = srp.server_start(self.v, self.params)
        return self.params.backend.to_bytes(self.B)

    def verify_client(self, A_msg, M1_msg):
        self._finish_once("verify_client")
        be = self.params.backend
        A = be.from_bytes(A_msg)
        M1 = be.from_bytes(M1_msg)
        S, M2 = srp.server_compute_secret_and_verify(A, self.v, self.b,
                                                     self.B, M1, self.params)
        # they know the password
        self._key = self._derive_key(S, self.salt)
        return be.to_bytes(M2)
