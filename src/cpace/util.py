from .errors import RandomUnavailable

def to_bytes(s):
    # passwords, identities and associated data: bytes are taken verbatim,
    # text is UTF-8 encoded
    if isinstance(s, str):
        return s.encode("utf-8")
    if isinstance(s, (bytes, bytearray, memoryview)):
        return bytes(s)
    raise TypeError("expected bytes or str, got %r" % type(s))

def zero_padding_length(used, block_size):
    """Return how many zero bytes bring 'used' bytes up to the next multiple
    of block_size (0 if already aligned)."""
    return -used % block_size

def length_prefixed(data):
    assert len(data) <= 0xff
    return bytes([len(data)]) + data

def random_bytes(entropy_f, num_bytes):
    """Draw exactly num_bytes from entropy_f (which behaves like os.urandom).
    Any failure becomes RandomUnavailable."""
    try:
        data = entropy_f(num_bytes)
    except (OSError, NotImplementedError) as e:
        raise RandomUnavailable("entropy source failed: %s" % (e,)) from e
    if not isinstance(data, bytes) or len(data) != num_bytes:
        raise RandomUnavailable("entropy source did not return %d bytes"
                                % num_bytes)
    return data
