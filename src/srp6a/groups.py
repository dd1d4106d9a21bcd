from .util import size_bits

# SRP needs a large safe prime N (N = 2q+1 with q prime) and a generator g
# of the multiplicative group modulo N. Nothing here checks primality: the
# groups below are the ones published in RFC 5054 appendix A, and callers
# who bring their own are responsible for having validated them.

class SRPGroup:
    def __init__(self, N, g):
        self.N = N
        self.g = g
        self.size_bits = size_bits(N)

    def __repr__(self):
        return "<SRPGroup %d-bit g=%d>" % (self.size_bits, self.g)

def _from_hex(*lines):
    return int("".join(lines), 16)

# RFC 5054 1024-bit group
G1024 = SRPGroup(
    N=_from_hex(
        "EEAF0AB9ADB38DD69C33F80AFA8FC5E86072618775FF3C0B9EA2314C9C256576",
        "D674DF7496EA81D3383B4813D692C6E0E0D5D8E250B98BE48E495C1D6089DAD1",
        "5DC7D7B46154D6B6CE8EF4AD69B15D4982559B297BCF1885C529F566660E57EC",
        "68EDBC3C05726CC02FD4CBF4976EAA9AFD5138FE8376435B9FC61D2FC0EB06E3"),
    g=2)

# RFC 5054 2048-bit group
G2048 = SRPGroup(
    N=_from_hex(
        "AC6BDB41324A9A9BF166DE5E1389582FAF72B6651987EE07FC3192943DB56050",
        "A37329CBB4A099ED8193E0757767A13DD52312AB4B03310DCD7F48A9DA04FD50",
        "E8083969EDB767B0CF6095179A163AB3661A05FBD5FAAAE82918A9962F0B93B8",
        "55F97993EC975EEAA80D740ADBF4FF747359D041D5C33EA71D281E446B14773B",
        "CA97B43A23FB801676BD207A436C6481F1D2B9078717461A5B9D32E688F87748",
        "544523B524B0D57D5EA77A2775D2ECFA032CFBDBF52FB3786160279004E57AE6",
        "AF874E7303CE53299CCC041C7BC308D82A5698F3A8D0C38271AE35F8E9DBFBB6",
        "94B5C803D89F7AE435DE236D525F54759B65E372FCD68EF20FA7111F9E4AFF73"),
    g=2)

# RFC 5054 3072-bit group (the RFC 3526 MODP prime)
G3072 = SRPGroup(
    N=_from_hex(
        "FFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD129024E08",
        "8A67CC74020BBEA63B139B22514A08798E3404DDEF9519B3CD3A431B",
        "302B0A6DF25F14374FE1356D6D51C245E485B576625E7EC6F44C42E9",
        "A637ED6B0BFF5CB6F406B7EDEE386BFB5A899FA5AE9F24117C4B1FE6",
        "49286651ECE45B3DC2007CB8A163BF0598DA48361C55D39A69163FA8",
        "FD24CF5F83655D23DCA3AD961C62F356208552BB9ED529077096966D",
        "670C354E4ABC9804F1746C08CA18217C32905E462E36CE3BE39E772C",
        "180E86039B2783A2EC07A28FB5C55DF06F4C52C9DE2BCBF695581718",
        "3995497CEA956AE515D2261898FA051015728E5A8AAAC42DAD33170D",
        "04507A33A85521ABDF1CBA64ECFB850458DBEF0A8AEA71575D060C7D",
        "B3970F85A6E1E4C7ABF5AE8CDB0933D71E8C94E04A25619DCEE3D226",
        "1AD2EE6BF12FFA06D98A0864D87602733EC86A64521F2B18177B200C",
        "BBE117577A615D6C770988C0BAD946E208E24FA074E5AB3143DB5BFC",
        "E0FD108E4B82D120A93AD2CAFFFFFFFFFFFFFFFF"),
    g=5)

assert G1024.size_bits == 1024
assert G2048.size_bits == 2048
assert G3072.size_bits == 3072
