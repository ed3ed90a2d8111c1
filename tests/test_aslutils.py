import sys
import aslutils as utils

PUBKEY = "f9308a019258c31049344f85f89d5229b531c845836f99b08601f113bce036f9"


def test_hex_bech32_round_trip():
    npub = utils.hexToBech32(PUBKEY, "npub")
    assert npub.startswith("npub1")
    assert utils.bech32ToHex(npub) == PUBKEY


def test_normalize_to_hex():
    npub = utils.hexToBech32(PUBKEY, "npub")
    assert utils.normalizeToHex(PUBKEY) == PUBKEY
    assert utils.normalizeToHex(PUBKEY.upper()) == PUBKEY
    assert utils.normalizeToHex(npub) == PUBKEY
    assert utils.normalizeToHex(f"nostr:{npub}") == PUBKEY
    assert utils.normalizeToHex("") == ""
    assert utils.normalizeToHex("xyz") is None


def test_get_command_arg(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["roll.py", "--AGE", "2", "--location", "u33"])
    assert utils.getCommandArg("age") == "2"
    assert utils.getCommandArg("location") == "u33"
    assert utils.getCommandArg("sex") is None
    assert utils.getIntArg("age") == 2
    assert utils.getIntArg("geobits", 15) == 15
