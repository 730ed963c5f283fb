
from .cpace import CPace_A, CPace_B, step1, step2, step3
from .errors import (CPaceError, IdentityTooLong, RandomUnavailable,
                     InvalidPeerElement, BadPacketLength, OnlyCallStartOnce,
                     OnlyCallFinishOnce, NotStarted)
from .finalize import SharedKeys, SHARED_KEY_BYTES
from .generator import MAX_IDENTITY_BYTES
from .messages import (SESSION_ID_BYTES, ELEMENT_BYTES, STEP1_PACKET_BYTES,
                       STEP2_PACKET_BYTES)
from .params import Params, ParamsRistretto255, DSI1, DSI2
CPace_A, CPace_B, step1, step2, step3 # hush pyflakes
CPaceError, IdentityTooLong, RandomUnavailable, InvalidPeerElement
BadPacketLength, OnlyCallStartOnce, OnlyCallFinishOnce, NotStarted
SharedKeys, SHARED_KEY_BYTES, MAX_IDENTITY_BYTES
SESSION_ID_BYTES, ELEMENT_BYTES, STEP1_PACKET_BYTES, STEP2_PACKET_BYTES
Params, ParamsRistretto255, DSI1, DSI2

from ._version import __version__
