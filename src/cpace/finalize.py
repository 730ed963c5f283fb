from collections import namedtuple

SHARED_KEY_BYTES = 32

SharedKeys = namedtuple("SharedKeys", ["k1", "k2"])

def finalize_CPace(params, K_bytes, Ya_bytes, Yb_bytes):
    # Ya is always the initiator's element and Yb the responder's, no matter
    # which side is calling. Swapping them on one side gives silently
    # different keys.
    h = params.hash_f()
    for piece in [params.dsi2, K_bytes, Ya_bytes, Yb_bytes]:
        h.update(piece)
    digest = h.digest()
    assert len(digest) == 2 * SHARED_KEY_BYTES
    return SharedKeys(k1=digest[:SHARED_KEY_BYTES],
                      k2=digest[SHARED_KEY_BYTES:])
