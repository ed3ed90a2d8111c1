#!/usr/bin/env python3
from aslbits import BitBuffer, roundByte
import aslgeo as geo

# Leading bits of a public key, in the order they are pushed:
#   geohash (geobits), sex (2), age (2)
# Decoding pops the fields back off in reverse order.
ASL_FIELDS = [("sex", 2), ("age", 2)]

class InvalidField(ValueError):
    pass

def layoutBits(geobits=geo.SANE_DEFAULT):
    return geobits + sum(width for _, width in ASL_FIELDS)

def prefixMask(nbits):
    if nbits % 8: return (1 << (nbits % 8)) - 1
    return 0xFF

def estimateTries(geobits=geo.SANE_DEFAULT):
    return 2 ** layoutBits(geobits)

def pushField(buf, name, value, width):
    if value < 0 or value >> width:
        raise InvalidField(f"{name} ({value}) does not fit in {width} bits")
    for k in reversed(range(width)):
        buf.shiftIn((value >> k) & 1)

def popField(buf, width):
    value = 0
    for k in range(width):
        value |= buf.shiftOut() << k
    return value

def buildPrefix(age, sex, location, geobits=geo.SANE_DEFAULT):
    nbits = layoutBits(geobits)
    buf = BitBuffer(roundByte(nbits))
    prefix = geo.packGeo(location, geobits, buf)
    values = {"age": age, "sex": sex}
    for name, width in ASL_FIELDS:
        pushField(prefix, name, values[name], width)
    return prefix, prefixMask(nbits)

def readFields(buf):
    fields = {}
    for name, width in reversed(ASL_FIELDS):
        fields[name] = popField(buf, width)
    return fields

def matchesPrefix(pk, prefix, mask):
    last = len(prefix) - 1
    for n in range(last):
        if pk[n] != prefix[n]: return False
    return (pk[last] & mask) == (prefix[last] & mask)
