import pysodium as bindings
from .errors import RandomUnavailable
from .util import random_bytes

"""Interface specification for a Group.

The protocol needs a prime-order group in which the discrete log is hard,
plus a way to map arbitrary hash output onto it without revealing anybody's
discrete log of the result.

* there is an 'identity' element, which never appears on the wire
* scalars are integers modulo the group order 'q', kept here in their
  32-byte little-endian encoding
* scalar multiplication is associative: (E*a)*b == (E*b)*a == E*(a*b)

    g = Ristretto255Group

    s = g.random_scalar(entropy_f)   # 64 random bytes, reduced mod q
    s = g.bytes_to_scalar(b64)       # wide reduction of 64 bytes
    e = g.hash_to_element(b64)       # uniform map, never fails
    e = g.bytes_to_element(b32)      # strict: raises ValueError

    e2 = e1.scalarmult(s)
    b32 = e.to_bytes()
    # equality tests work: e1 == e2, e1 != e2

The functions that produce random scalars require an entropy function, which
is expected to behave like os.urandom. The only reason to not use os.urandom
is for deterministic unit tests.
"""

class _Element:
    def __init__(self, group, e):
        self._group = group
        self._e = e

    def scalarmult(self, s):
        return self._group._scalarmult(self, s)

    def to_bytes(self):
        return self._group._element_to_bytes(self)

    def __eq__(self, other):
        if not isinstance(other, _Element):
            return NotImplemented
        return self._group is other._group and self._e == other._e

    def __ne__(self, other):
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return eq
        return not eq

    def __hash__(self):
        return hash(self._e)

    def __repr__(self):
        return "<Element %s>" % self._e.hex()

class _Ristretto255Group:
    element_size_bytes = bindings.crypto_core_ristretto255_BYTES
    scalar_size_bytes = bindings.crypto_core_ristretto255_SCALARBYTES
    hash_size_bytes = bindings.crypto_core_ristretto255_HASHBYTES
    wide_scalar_size_bytes = \
        bindings.crypto_core_ristretto255_NONREDUCEDSCALARBYTES

    # the canonical encoding of the identity element
    identity_bytes = b"\x00" * element_size_bytes
    zero_scalar = b"\x00" * scalar_size_bytes

    def random_scalar(self, entropy_f):
        # reducing twice the scalar size keeps the modulo bias negligible
        wide = random_bytes(entropy_f, self.wide_scalar_size_bytes)
        s = self.bytes_to_scalar(wide)
        if s == self.zero_scalar:
            # only a broken entropy source gets here
            raise RandomUnavailable("entropy source produced a zero scalar")
        return s

    def bytes_to_scalar(self, b):
        assert isinstance(b, bytes)
        assert len(b) == self.wide_scalar_size_bytes
        return bindings.crypto_core_ristretto255_scalar_reduce(b)

    def hash_to_element(self, h):
        assert isinstance(h, bytes)
        assert len(h) == self.hash_size_bytes
        return _Element(self, bindings.crypto_core_ristretto255_from_hash(h))

    def bytes_to_element(self, b):
        # for receiving from other side: only canonical encodings of
        # non-identity elements are accepted
        if not isinstance(b, bytes) or len(b) != self.element_size_bytes:
            raise ValueError("alleged element has the wrong length")
        if b == self.identity_bytes:
            raise ValueError("element is the identity")
        if not bindings.crypto_core_ristretto255_is_valid_point(b):
            raise ValueError("element is not a valid ristretto255 encoding")
        return _Element(self, b)

    def _element_to_bytes(self, e):
        assert isinstance(e, _Element)
        assert e._group is self
        return e._e

    def _scalarmult(self, e, s):
        if not isinstance(e, _Element):
            raise TypeError("E*N requires E be an element")
        assert e._group is self
        if not isinstance(s, bytes) or len(s) != self.scalar_size_bytes:
            raise TypeError("E*N requires N be a scalar")
        # s is never zero (random_scalar) and e is never the identity
        # (bytes_to_element, or a hash output), so the product is never the
        # identity libsodium refuses to return
        return _Element(self, bindings.crypto_scalarmult_ristretto255(s, e._e))

Ristretto255Group = _Ristretto255Group()
