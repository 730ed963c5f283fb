from .errors import IdentityTooLong
from .messages import SESSION_ID_BYTES
from .util import to_bytes, zero_padding_length, length_prefixed

MAX_IDENTITY_BYTES = 0xff

# p = hash_to_element(H(DSI1 || pw || zpad || sid ||
#                       len(idA) || idA || len(idB) || idB || ad))
#
# zpad brings DSI1||pw up to a hash block boundary. Every field after the
# session id is either length-prefixed or last, so the encoding is
# unambiguous.

def generator_hash_input(params, session_id, password, idA, idB, ad=None):
    """Return the list of byte strings hashed to derive the generator, in
    order."""
    if not isinstance(session_id, bytes) or len(session_id) != SESSION_ID_BYTES:
        raise ValueError("session id must be %d bytes" % SESSION_ID_BYTES)
    pw = to_bytes(password)
    idA = to_bytes(idA)
    idB = to_bytes(idB)
    for name, ident in [("idA", idA), ("idB", idB)]:
        if len(ident) > MAX_IDENTITY_BYTES:
            raise IdentityTooLong("%s is %d bytes, at most %d allowed"
                                  % (name, len(ident), MAX_IDENTITY_BYTES))
    pad_len = zero_padding_length(len(params.dsi1) + len(pw),
                                  params.hash_block_size)
    pieces = [params.dsi1, pw, b"\x00" * pad_len, session_id,
              length_prefixed(idA), length_prefixed(idB)]
    if ad is not None:
        pieces.append(to_bytes(ad))
    return pieces

def derive_generator(params, session_id, password, idA, idB, ad=None):
    pieces = generator_hash_input(params, session_id, password, idA, idB, ad)
    h = params.hash_f()
    for piece in pieces:
        h.update(piece)
    return params.group.hash_to_element(h.digest())
