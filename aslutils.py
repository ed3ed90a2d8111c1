#!/usr/bin/env python3
import bech32
import os
import sys

def bech32ToHex(bech32Input):
    hrp, e2 = bech32.bech32_decode(bech32Input)
    if hrp is None: return ""
    tlv_bytes = bech32.convertbits(e2, 5, 8)[:-1]
    if len(tlv_bytes) > 32:
        tlv_length = tlv_bytes[1]
        tlv_value = tlv_bytes[2:tlv_length+2]
        hexOutput = bytes(tlv_value).hex()
    else:
        hexOutput = bytes(tlv_bytes).hex()
    return hexOutput

def hexToBech32(hexInput, hrp):
    b = bytes.fromhex(hexInput)
    bits = bech32.convertbits(b,8,5)
    bech32output = bech32.bech32_encode(hrp, bits)
    return bech32output

def isHex(s):
    return set(s).issubset(set('abcdefABCDEF0123456789'))

def normalizeToHex(v):
    # v can be hex, npub or nostr:npub
    if len(v) == 0: return ""
    if str(v).startswith("nostr:"): v = v[6:]
    if str(v).startswith("n"): v = bech32ToHex(v)
    if isHex(v): return v.lower()
    return None

def getCommandArg(p, default=None):
    b = False
    v = default
    l = str(p).lower()
    for a in sys.argv:
        if b:
            v = a
            b = False
        elif f"--{l}" == str(a).lower():
            b = True
    return v

def getIntArg(p, default=None):
    v = getCommandArg(p)
    if v is None: return default
    return int(v)

def makeFolderIfNotExists(path):
    if not os.path.exists(path): os.makedirs(path)
