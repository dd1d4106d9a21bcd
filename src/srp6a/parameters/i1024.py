from ..params import Params
from ..groups import G1024
# Params1024 uses the RFC 5054 1024-bit group with SHA-256. It is roughly as
# secure as an 80-bit symmetric key.
Params1024 = Params(G1024)
