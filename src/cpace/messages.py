from .errors import BadPacketLength

# Both packets have a fixed layout with no tag or version byte: the format is
# pinned to one protocol identifier and one group.
#
#  step1: session_id[16] || Y_A[32]
#  step2: Y_B[32]

SESSION_ID_BYTES = 16
ELEMENT_BYTES = 32
STEP1_PACKET_BYTES = SESSION_ID_BYTES + ELEMENT_BYTES
STEP2_PACKET_BYTES = ELEMENT_BYTES

def _check_length(what, data, expected):
    if not isinstance(data, bytes):
        raise TypeError("%s must be bytes, not %r" % (what, type(data)))
    if len(data) != expected:
        raise BadPacketLength("%s must be %d bytes, got %d"
                              % (what, expected, len(data)))

def pack_step1(session_id, element_bytes):
    assert len(session_id) == SESSION_ID_BYTES
    assert len(element_bytes) == ELEMENT_BYTES
    return session_id + element_bytes

def unpack_step1(packet):
    """Split a step1 packet into (session_id, element_bytes). The element is
    not validated here."""
    _check_length("step1 packet", packet, STEP1_PACKET_BYTES)
    return packet[:SESSION_ID_BYTES], packet[SESSION_ID_BYTES:]

def pack_step2(element_bytes):
    assert len(element_bytes) == ELEMENT_BYTES
    return element_bytes

def unpack_step2(packet):
    _check_length("step2 packet", packet, STEP2_PACKET_BYTES)
    return packet
