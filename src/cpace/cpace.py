import os
import logging
from .errors import (InvalidPeerElement, OnlyCallStartOnce, OnlyCallFinishOnce,
                     NotStarted)
from .params import Params, ParamsRistretto255
from .generator import derive_generator
from .finalize import finalize_CPace
from .messages import (SESSION_ID_BYTES, pack_step1, unpack_step1,
                       pack_step2, unpack_step2)
from .util import random_bytes

logger = logging.getLogger(__name__)

DefaultParams = ParamsRistretto255

# A: sid = random(16)
#    p = derive_generator(sid, pw, idA, idB, ad)
#    rA = random(Zq); YA = p*rA                      -> sid || YA
#  B: p = derive_generator(sid, pw, idA, idB, ad)
#     rB = random(Zq); YB = p*rB                     -> YB
#     K = YA*rB; keys = H(DSI2 || K || YA || YB)
# A: K = YB*rA; keys = H(DSI2 || K || YA || YB)

def generate_keypair(params, generator, entropy_f):
    """Return (r, Y): a fresh secret scalar and the public element
    generator*r."""
    r = params.group.random_scalar(entropy_f)
    return r, generator.scalarmult(r)

def _decode_peer_element(params, element_bytes):
    try:
        return params.group.bytes_to_element(element_bytes)
    except ValueError as e:
        logger.warning("rejecting peer element: %s", e)
        raise InvalidPeerElement(str(e)) from e

class _CPace_Base:
    "This class manages one side of a CPace key exchange."

    def __init__(self, password, idA=b"", idB=b"", ad=None,
                 params=DefaultParams, entropy_f=os.urandom):
        assert isinstance(params, Params), repr(params)
        self.params = params
        self.entropy_f = entropy_f
        self.pw = password
        self.idA = idA
        self.idB = idB
        self.ad = ad

        self._finished = False

    def _compute_own_element(self, session_id):
        generator = derive_generator(self.params, session_id, self.pw,
                                     self.idA, self.idB, self.ad)
        return generate_keypair(self.params, generator, self.entropy_f)

# applications should use CPace_A and CPace_B, not raw _CPace_Base()

class CPace_A(_CPace_Base):
    """The initiator. start() emits the step1 packet, finish() consumes the
    responder's step2 packet and returns the SharedKeys."""

    def __init__(self, password, idA=b"", idB=b"", ad=None,
                 params=DefaultParams, entropy_f=os.urandom):
        _CPace_Base.__init__(self, password, idA, idB, ad,
                             params=params, entropy_f=entropy_f)
        self._started = False
        self.session_id = None
        self.packet = None

    def start(self):
        if self._started:
            raise OnlyCallStartOnce("start() can only be called once")
        self._started = True

        self.session_id = random_bytes(self.entropy_f, SESSION_ID_BYTES)
        self._r, Ya = self._compute_own_element(self.session_id)
        self._Ya_bytes = Ya.to_bytes()
        self.packet = pack_step1(self.session_id, self._Ya_bytes)
        logger.debug("CPace_A started session %s", self.session_id.hex())
        return self.packet

    def finish(self, step2_packet):
        if not self._started:
            raise NotStarted("call start() before finish()")
        if self._finished:
            raise OnlyCallFinishOnce("finish() can only be called once")
        self._finished = True
        # the context is single-use: forget the scalar even if decoding fails
        r, self._r = self._r, None

        Yb = _decode_peer_element(self.params, unpack_step2(step2_packet))
        K = Yb.scalarmult(r)
        keys = finalize_CPace(self.params, K.to_bytes(),
                              self._Ya_bytes, Yb.to_bytes())
        logger.debug("CPace_A finished session %s", self.session_id.hex())
        return keys

class CPace_B(_CPace_Base):
    """The responder. respond() takes the step1 packet and returns
    (step2_packet, SharedKeys) in one go; nothing is retained."""

    def respond(self, step1_packet):
        if self._finished:
            raise OnlyCallFinishOnce("respond() can only be called once")
        self._finished = True

        session_id, Ya_bytes = unpack_step1(step1_packet)
        r, Yb = self._compute_own_element(session_id)
        Yb_bytes = Yb.to_bytes()
        Ya = _decode_peer_element(self.params, Ya_bytes)
        K = Ya.scalarmult(r)
        keys = finalize_CPace(self.params, K.to_bytes(),
                              Ya.to_bytes(), Yb_bytes)
        logger.debug("CPace_B responded to session %s", session_id.hex())
        return pack_step2(Yb_bytes), keys

def step1(password, idA=b"", idB=b"", ad=None,
          params=DefaultParams, entropy_f=os.urandom):
    """Start an exchange as the initiator. The returned CPace_A holds the
    step1 packet in .packet; pass it to step3() with the peer's answer."""
    ctx = CPace_A(password, idA, idB, ad, params=params, entropy_f=entropy_f)
    ctx.start()
    return ctx

def step2(step1_packet, password, idA=b"", idB=b"", ad=None,
          params=DefaultParams, entropy_f=os.urandom):
    """Answer an initiator. Returns (step2_packet, SharedKeys)."""
    return CPace_B(password, idA, idB, ad, params=params,
                   entropy_f=entropy_f).respond(step1_packet)

def step3(ctx, step2_packet):
    return ctx.finish(step2_packet)
