from ..params import Params
from ..groups import G3072
# Params3072 uses the RFC 5054 3072-bit group (g=5) with SHA-256, for about
# 128-bit security.
Params3072 = Params(G3072)
