#!/usr/bin/env python3
from nostr.key import PrivateKey
import secrets

# order of the secp256k1 group
CURVE_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

def generateRandomPrivateKey():
    while True:
        sk = secrets.token_bytes(32)
        if 0 < int.from_bytes(sk, "big") < CURVE_ORDER: return sk

def derivePublicKey(privateKey):
    # x-only, even Y (BIP-340)
    return PrivateKey(privateKey).public_key.raw_bytes

def privateKeyFromHex(skHex):
    return PrivateKey(bytes.fromhex(skHex))

def publicKeyHex(skHex):
    return privateKeyFromHex(skHex).public_key.hex()

def toNsec(skHex):
    return privateKeyFromHex(skHex).bech32()

def toNpub(skHex):
    return privateKeyFromHex(skHex).public_key.bech32()
