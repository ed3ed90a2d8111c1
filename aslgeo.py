#!/usr/bin/env python3
from aslbits import BitBuffer, roundByte

# geohash specific base32 map
GHM = "0123456789bcdefghjkmnpqrstuvwxyz"
GHU = {c: i for i, c in enumerate(GHM)}

SANE_DEFAULT = 15   # geohash bits, somewhat sane

class InvalidPrecision(ValueError):
    pass

class BufferUnderflow(ValueError):
    pass

class InvalidGeohash(ValueError):
    pass

def quintetOf(c):
    if c not in GHU:
        raise InvalidGeohash(f"character ({c}) is not in the geohash alphabet")
    return GHU[c]

def packGeo(hash, nBits=SANE_DEFAULT, buf=None):
    """Bitpacks a geohash string to arbitrary bit precision.

    'u120fw' holds 30 bits, accurate to about 1.2 kilometers. Characters are
    pushed last needed character first and most significant bit first, so the
    first character ends up in the lowest bit positions of buf. When nBits is
    not a multiple of 5 only the top bits of the last needed character are
    kept.
    """
    nBits = min(len(hash) * 5, nBits)
    if nBits < 5:
        raise InvalidPrecision(f"precision has to be at least 5 bits, got {nBits}")
    if buf is None: buf = BitBuffer(roundByte(nBits))
    tail = (nBits + 4) // 5 - 1
    for i in range(tail, -1, -1):
        quintet = BitBuffer(data=[quintetOf(hash[i]) << 3])
        x = 5
        if i == tail and nBits % 5: x = nBits % 5
        for _ in range(x):
            buf.shiftIn(quintet.shiftIn())
    return buf

def unpackGeo(buf, nBits=SANE_DEFAULT):
    nBytes = roundByte(nBits)
    if len(buf) < nBytes:
        raise BufferUnderflow(f"need {nBytes} bytes to unpack {nBits} bits, got {len(buf)}")
    cpy = BitBuffer(data=bytes(buf[i] for i in range(nBytes)))
    chars = []
    acc = BitBuffer(1)
    for n in range(nBits):
        if n and n % 5 == 0:
            chars.append(GHM[acc[0] >> 3])
            acc = BitBuffer(1)
        acc.shiftOut(cpy.shiftOut())
    chars.append(GHM[acc[0] >> 3])
    return "".join(chars).rstrip("0")
