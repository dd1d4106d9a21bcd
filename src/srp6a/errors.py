class SRPError(Exception):
    pass
class InvalidConfiguration(SRPError):
    """The group, hash functions or private-value generators handed to
    Params() are unusable."""
class InvalidEncoding(SRPError):
    """Bytes handed to a big-integer backend could not be read as a
    number."""
class InvalidPublicValue(SRPError):
    """The other side sent a public value that is zero modulo N. The session
    must be abandoned and restarted with fresh private values."""
class ZeroScramblingParameter(SRPError):
    """u = H(A, B) came out as zero. The session must be abandoned."""
class EvidenceMismatch(SRPError):
    """The evidence message we received is not the one we computed: the
    other side does not hold the same shared secret."""
class OnlyCallStartOnce(SRPError):
    """start() may only be called once. Re-using private values across
    sessions can reveal the password verifier or the derived key."""
class OnlyCallFinishOnce(SRPError):
    """The finishing step may only be called once per session."""
class OutOfOrder(SRPError):
    """A session step was called before the steps it depends on."""
class NotAuthenticated(SRPError):
    """The session key is only available after the other side's evidence
    has been verified."""
