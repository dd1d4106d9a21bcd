from ..params import Params
from ..groups import G2048
# Params2048 uses the RFC 5054 2048-bit group with SHA-256, for about
# 112-bit security.
Params2048 = Params(G2048)
