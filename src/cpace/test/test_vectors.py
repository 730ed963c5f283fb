import unittest
from binascii import unhexlify
from hashlib import sha512
from cpace.cpace import CPace_A, CPace_B
from cpace.groups import Ristretto255Group
from . import slow_ristretto as slow
from .common import PRG

# multiples of the ristretto255 generator, from RFC 9496 appendix A.1
BASE_MULTIPLES = [
    "e2f2ae0a6abc4e71a884a961c500515f58e30b6aa582dd8db6a65945e08d2d76",
    "6a493210f7499cd17fecb510ae0cea23a110e8d5b901f8acadd3095c73a3b919",
    "94741f5d5d52755ece4f23f044ee27d5d1ea1e2bd196b462166b16152a9d0259",
    "da80862773358b466ffadfe0b3293ab3d9fd53c5ea6c955358f568322daf6a57",
    ]

# non-canonical and negative field elements, from RFC 9496 appendix A.2
BAD_ENCODINGS = [
    "00ffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffff",
    "ffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffff7f",
    "f3ffffffffffffffffffffffffffffffffffffffffffffffffffffffffffff7f",
    "edffffffffffffffffffffffffffffffffffffffffffffffffffffffffffff7f",
    "0100000000000000000000000000000000000000000000000000000000000000",
    "01ffffffffffffffffffffffffffffffffffffffffffffffffffffffffffff7f",
    ]

def scalar(n):
    return n.to_bytes(32, "little")

class Group(unittest.TestCase):
    def test_base_multiples(self):
        g = Ristretto255Group
        B = g.bytes_to_element(unhexlify(BASE_MULTIPLES[0]))
        for n, expected in enumerate(BASE_MULTIPLES[1:], 2):
            self.assertEqual(B.scalarmult(scalar(n)).to_bytes().hex(),
                             expected)

    def test_slow_base_multiples(self):
        B = slow.decode(unhexlify(BASE_MULTIPLES[0]))
        self.assertEqual(slow.encode(B).hex(), BASE_MULTIPLES[0])
        for n, expected in enumerate(BASE_MULTIPLES[1:], 2):
            self.assertEqual(slow.encode(slow.scalarmult(B, n)).hex(),
                             expected)

    def test_bad_encodings(self):
        for e in BAD_ENCODINGS:
            self.assertRaises(ValueError,
                              Ristretto255Group.bytes_to_element, unhexlify(e))
            self.assertRaises(ValueError, slow.decode, unhexlify(e))

    def test_scalar_reduction(self):
        for wide in [b"\xff"*64, PRG(b"wide")(64),
                     (slow.L + 5).to_bytes(64, "little")]:
            expected = scalar(slow.reduce_scalar(wide))
            self.assertEqual(Ristretto255Group.bytes_to_scalar(wide), expected)
        self.assertEqual(
            Ristretto255Group.bytes_to_scalar((slow.L + 5).to_bytes(64, "little")),
            scalar(5))

    def test_hash_to_element(self):
        for seed in [b"", b"one", b"two", b"CPaceRistretto255-1"]:
            h = sha512(seed).digest()
            self.assertEqual(Ristretto255Group.hash_to_element(h).to_bytes(),
                             slow.encode(slow.from_hash(h)))

class Exchange(unittest.TestCase):
    # recompute a whole run from the wire format alone
    def test_known_run(self):
        pw, idA, idB, ad = b"password", b"client", b"server", b"ad"
        sA = CPace_A(pw, idA, idB, ad, entropy_f=PRG(b"vector-A"))
        sB = CPace_B(pw, idA, idB, ad, entropy_f=PRG(b"vector-B"))
        m1 = sA.start()
        m2, kB = sB.respond(m1)
        kA = sA.finish(m2)

        fa, fb = PRG(b"vector-A"), PRG(b"vector-B")
        sid = fa(16)
        rA = slow.reduce_scalar(fa(64))
        rB = slow.reduce_scalar(fb(64))

        dsi = b"CPaceRistretto255-1"
        # 19 bytes of tag plus 8 of password, padded to the 128-byte block
        transcript = (dsi + pw + b"\x00" * 101 + sid +
                      b"\x06client" + b"\x06server" + b"ad")
        self.assertEqual(len(dsi + pw + b"\x00" * 101), 128)
        G = slow.from_hash(sha512(transcript).digest())
        YA = slow.scalarmult(G, rA)
        YB = slow.scalarmult(G, rB)
        K = slow.scalarmult(YB, rA)
        self.assertEqual(slow.encode(K),
                         slow.encode(slow.scalarmult(YA, rB)))

        self.assertEqual(m1, sid + slow.encode(YA))
        self.assertEqual(m2, slow.encode(YB))
        digest = sha512(dsi + slow.encode(K) + slow.encode(YA) +
                        slow.encode(YB)).digest()
        self.assertEqual(kA.k1, digest[:32])
        self.assertEqual(kA.k2, digest[32:])
        self.assertEqual(kB, kA)

if __name__ == '__main__':
    unittest.main()
