
from .errors import (SRPError, InvalidConfiguration, InvalidEncoding,
                     InvalidPublicValue, ZeroScramblingParameter,
                     EvidenceMismatch)
from .params import Params, RandomPrivateValue, FixedPrivateValue
from .srp import (compute_verifier, client_start, server_start,
                  client_compute_secret_and_evidence,
                  server_compute_secret_and_verify,
                  client_verify_server_evidence, derive_session_key,
                  KEY_DIGEST, KEY_HMAC, DefaultParams)
from .session import SRPClient, SRPServer, create_verifier
_hush_pyflakes = [SRPError, InvalidConfiguration, InvalidEncoding,
                  InvalidPublicValue, ZeroScramblingParameter,
                  EvidenceMismatch, Params, RandomPrivateValue,
                  FixedPrivateValue, compute_verifier, client_start,
                  server_start, client_compute_secret_and_evidence,
                  server_compute_secret_and_verify,
                  client_verify_server_evidence, derive_session_key,
                  KEY_DIGEST, KEY_HMAC, DefaultParams,
                  SRPClient, SRPServer, create_verifier]
del _hush_pyflakes

__version__ = "0.1.0"
