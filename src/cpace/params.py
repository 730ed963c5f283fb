import hashlib
from .groups import Ristretto255Group

# DSI1 separates the generator derivation and DSI2 the final key hash. Both
# must name this exact group and wire format: a different group or packet
# layout needs different tags, or values from one protocol could be replayed
# into another. The published ristretto255 tag is used for both, which keeps
# us interoperable with existing CPaceRistretto255-1 peers.

DSI_RISTRETTO255 = b"CPaceRistretto255-1"
DSI1 = DSI_RISTRETTO255
DSI2 = DSI_RISTRETTO255

class Params:
    def __init__(self, group, dsi1, dsi2, hash_f=hashlib.sha512):
        assert isinstance(dsi1, bytes), repr(dsi1)
        assert isinstance(dsi2, bytes), repr(dsi2)
        self.group = group
        self.dsi1 = dsi1
        self.dsi2 = dsi2
        self.hash_f = hash_f
        # the generator hash is mapped straight onto the group, so its
        # digest has to be exactly what hash_to_element consumes
        assert hash_f().digest_size == group.hash_size_bytes
        self.hash_block_size = hash_f().block_size

ParamsRistretto255 = Params(Ristretto255Group, dsi1=DSI1, dsi2=DSI2)
