import aslkeys


def test_generate_private_key():
    a = aslkeys.generateRandomPrivateKey()
    b = aslkeys.generateRandomPrivateKey()
    assert len(a) == 32
    assert a != b


def test_derive_x_only_public_key():
    sk = (3).to_bytes(32, "big")
    pk = aslkeys.derivePublicKey(sk)
    assert len(pk) == 32
    assert pk.hex() == "f9308a019258c31049344f85f89d5229b531c845836f99b08601f113bce036f9"


def test_bech32_presentation():
    skHex = (3).to_bytes(32, "big").hex()
    assert aslkeys.publicKeyHex(skHex) == "f9308a019258c31049344f85f89d5229b531c845836f99b08601f113bce036f9"
    assert aslkeys.toNsec(skHex).startswith("nsec1")
    assert aslkeys.toNpub(skHex).startswith("npub1")
