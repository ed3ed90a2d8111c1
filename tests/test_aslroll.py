import pytest
import aslroll
from asldecode import decodeASL
from aslkeys import publicKeyHex

SECRET = bytes([0x11] * 32)


class FixedKeys:
    def __init__(self, pks):
        self.pks = list(pks)
        self.calls = 0

    def generateRandomPrivateKey(self):
        self.calls += 1
        return bytes([self.calls]) + SECRET[1:]

    def derivePublicKey(self, sk):
        return self.pks[(sk[0] - 1) % len(self.pks)]


MATCH = b"\xa0\x01" + bytes(30)
MISS = b"\xa0\x00" + bytes(30)


def test_roll_returns_matching_key():
    keys = FixedKeys([MATCH])
    assert aslroll.roll(0, 0, "u33dc", 5, 1, keys) == "01" + "11" * 31


def test_roll_ignores_bits_past_the_prefix():
    keys = FixedKeys([b"\xa0\xff" + bytes(range(30))])
    assert aslroll.roll(0, 0, "u", 5, 1, keys) is not None


def test_roll_gives_up_after_max_tries():
    keys = FixedKeys([MISS])
    assert aslroll.roll(0, 0, "u33dc", 5, 1, keys) is None
    assert keys.calls == 1


def test_roll_keeps_going_until_match():
    keys = FixedKeys([MISS, MISS, MISS, MATCH])
    assert aslroll.roll(0, 0, "u", 5, 10, keys) == "04" + "11" * 31
    assert keys.calls == 4


def test_grind_counts_whole_batches():
    keys = FixedKeys([MISS, MISS, MISS, MISS, MATCH])
    sk, tries = aslroll.grind(0, 0, "u", 5, batchSize=2, maxBatches=5, keys=keys)
    assert sk == "05" + "11" * 31
    assert tries == 6


def test_grind_stops_after_max_batches():
    keys = FixedKeys([MISS])
    sk, tries = aslroll.grind(0, 0, "u", 5, batchSize=3, maxBatches=4, keys=keys)
    assert sk is None
    assert tries == 12
    assert keys.calls == 12


def test_grind_checks_stop_between_batches():
    keys = FixedKeys([MISS])
    checks = []

    def shouldStop():
        checks.append(1)
        return len(checks) > 2

    sk, tries = aslroll.grind(0, 0, "u", 5, batchSize=5, shouldStop=shouldStop, keys=keys)
    assert sk is None
    assert tries == 10
    assert keys.calls == 10


@pytest.mark.slow
def test_roll_with_real_keys():
    sk = aslroll.roll(1, 2, "u33", 5, 100000)
    assert sk is not None
    asl = decodeASL(publicKeyHex(sk), 5)
    assert asl == {"age": 1, "sex": 2, "location": "u"}
