#!/usr/bin/env python3

# Buffers are treated as a chain of latched 8 bit shift registers.
# Bit position p lives in bit (p % 8) of byte (p // 8).

def roundByte(bits):
    return (bits >> 3) + (1 if bits % 8 else 0)

def shift(x, inp=0):
    # every position moves up one, inp lands on position 0
    c = 1 if inp else 0
    for i in range(len(x)):
        nc = (x[i] >> 7) & 1
        x[i] = ((x[i] << 1) | c) & 0xFF
        c = nc
    return c

def unshift(x, inp=0):
    # every position moves down one, inp lands on the top position
    c = 0x80 if inp else 0
    for i in reversed(range(len(x))):
        nc = (x[i] & 1) << 7
        x[i] = c | (x[i] >> 1)
        c = nc
    return 1 if c else 0

def binstr(x, cap=None, bs=5):
    if isinstance(x, int): x = [x]
    if cap is None: cap = len(x) * 8
    s = ""
    for i in range(len(x)):
        for j in range(8):
            p = i * 8 + j
            if p != 0 and p % bs == 0: s += " "
            if p == cap: s += "|"
            s += "1" if x[i] & (1 << j) else "0"
    return s

class BitBuffer:
    """Owns a bytearray and shifts single bits in and out of it.

    shiftIn pushes a bit onto position 0 and returns what fell off the top,
    shiftOut pushes a bit onto the top and returns what fell off position 0.
    The two are exact inverses when fed each other's carry.
    """

    def __init__(self, size=0, data=None):
        if data is not None:
            self.data = bytearray(data)
        else:
            self.data = bytearray(size)

    def shiftIn(self, bit=0):
        return shift(self.data, bit)

    def shiftOut(self, bit=0):
        return unshift(self.data, bit)

    def __len__(self):
        return len(self.data)

    def __getitem__(self, i):
        return self.data[i]

    def __bytes__(self):
        return bytes(self.data)

    def __eq__(self, other):
        if isinstance(other, BitBuffer): return self.data == other.data
        if isinstance(other, (bytes, bytearray)): return self.data == other
        return NotImplemented

    def __repr__(self):
        return f"BitBuffer({self.data.hex()})"
