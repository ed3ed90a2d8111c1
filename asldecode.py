#!/usr/bin/env python3
from aslbits import BitBuffer, roundByte
import aslgeo as geo
import asllayout as layout
import aslutils as utils

AGES = ["16+", "24+", "32+", "40+"]
SEXES = ["Female", "Male", "Nonbinary", "Bot"]

def publicKeyBytes(publicKey):
    if isinstance(publicKey, (bytes, bytearray, BitBuffer)):
        return bytes(publicKey)
    if isinstance(publicKey, str):
        v = publicKey.strip()
        if v.startswith("nostr:"): v = v[6:]
        if v.startswith("n") and not v.startswith(("npub1", "nprofile1")):
            raise ValueError(f"Value ({publicKey}) is bech32 but not an npub or nprofile")
        h = utils.normalizeToHex(v)
        if h is None or len(h) != 64:
            raise ValueError(f"Value ({publicKey}) is not a hex or npub public key")
        return bytes.fromhex(h)
    raise ValueError(f"Unsupported public key type {type(publicKey).__name__}")

def decodeASL(publicKey, geobits=geo.SANE_DEFAULT):
    """Holistically decodes age, sex and location from a public key.

    publicKey may be raw bytes, hex or an npub.
    """
    pk = publicKeyBytes(publicKey)
    nBytes = roundByte(layout.layoutBits(geobits))
    if len(pk) < nBytes:
        raise geo.BufferUnderflow(f"need {nBytes} bytes of public key, got {len(pk)}")
    # shiftOut alters the buffer, work on a copy
    cpy = BitBuffer(data=pk[:nBytes])
    fields = layout.readFields(cpy)
    fields["location"] = geo.unpackGeo(cpy, geobits)
    return {"age": fields["age"], "sex": fields["sex"], "location": fields["location"]}

def describeASL(asl):
    return f"{AGES[asl['age']]} {SEXES[asl['sex']]} @ {asl['location']}"
