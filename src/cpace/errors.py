
class CPaceError(Exception):
    pass
class IdentityTooLong(CPaceError):
    """An identity does not fit behind its one-byte length prefix (at most
    255 bytes once encoded)."""
class RandomUnavailable(CPaceError):
    """The entropy source failed to deliver. The run must be abandoned: we
    never continue with weaker or missing randomness."""
class InvalidPeerElement(CPaceError):
    """The peer's message did not contain a valid group element."""
class BadPacketLength(CPaceError):
    pass
class OnlyCallStartOnce(CPaceError):
    """start() may only be called once. Re-using a CPace instance would reuse
    the session id and the ephemeral scalar."""
class OnlyCallFinishOnce(CPaceError):
    """finish()/respond() may only be called once. Each context maps to
    exactly one completed run."""
class NotStarted(CPaceError):
    """finish() was called before start()."""
