#!/usr/bin/env python3
import logging
import time
from aslbits import binstr
import aslgeo as geo
import aslkeys
import asllayout as layout

logger = logging.getLogger(__name__)    # replaced by scripts

def roll(age, sex, location, geobits=geo.SANE_DEFAULT, maxTries=500000, keys=None):
    """Rolls keypairs until a public key starts with the ASL prefix.

    age: 0: 16+, 1: 24+, 2: 32+, 3: 40+
    sex: 0: Female, 1: Male, 2: Nonbinary, 3: Bot
    location: a geohash, packed to geobits bits

    Returns the private key as hex, or None if nothing matched within
    maxTries. keys supplies generateRandomPrivateKey and derivePublicKey and
    defaults to the aslkeys module.
    """
    if keys is None: keys = aslkeys
    prefix, mask = layout.buildPrefix(age, sex, location, geobits)
    nbits = layout.layoutBits(geobits)
    logger.debug(f"Searching for {nbits} bits {binstr(prefix.data, nbits)} mask {mask:08b}")
    target = bytes(prefix)
    for _ in range(maxTries):
        sk = keys.generateRandomPrivateKey()
        pk = keys.derivePublicKey(sk)
        if layout.matchesPrefix(pk, target, mask):
            return sk.hex()
    return None

def grind(age, sex, location, geobits=geo.SANE_DEFAULT, batchSize=5000, maxBatches=0, shouldStop=None, keys=None):
    # roll in bounded batches so callers can stop between them
    expected = layout.estimateTries(geobits)
    tries = 0
    batches = 0
    startTime = time.time()
    while maxBatches <= 0 or batches < maxBatches:
        if shouldStop is not None and shouldStop():
            logger.info(f"Stopped after {tries} tries")
            break
        sk = roll(age, sex, location, geobits, batchSize, keys)
        batches += 1
        tries += batchSize
        if sk is not None:
            # the match sits somewhere in the last batch
            logger.info(f"Found key within {tries} tries (expected about {expected})")
            return sk, tries
        elapsed = time.time() - startTime
        rate = int(tries / elapsed) if elapsed > 0 else 0
        logger.info(f"Rolled {tries} keys (expected about {expected}) at {rate} keys/sec")
    return None, tries
