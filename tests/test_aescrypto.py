import pytest

from landlord.aescrypto import AesCrypto, Algorithm


def _key(algorithm):
    return bytes(range(algorithm.key_size))


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_round_trip(algorithm):
    crypto = AesCrypto(algorithm, _key(algorithm))
    plain = b"three players, one landlord"
    assert crypto.decrypt(crypto.encrypt(plain)) == plain


@pytest.mark.parametrize("algorithm", [Algorithm.AES_ECB_128, Algorithm.AES_CBC_256])
def test_block_modes_pad_to_block_size(algorithm):
    crypto = AesCrypto(algorithm, _key(algorithm))
    for size in (0, 1, 15, 16, 17):
        cipher = crypto.encrypt(b"a" * size)
        assert len(cipher) % 16 == 0
        assert len(cipher) > size


@pytest.mark.parametrize("algorithm", [Algorithm.AES_CFB_192, Algorithm.AES_OFB_128, Algorithm.AES_CTR_256])
def test_stream_modes_keep_length(algorithm):
    crypto = AesCrypto(algorithm, _key(algorithm))
    assert len(crypto.encrypt(b"x" * 21)) == 21


def test_encryption_is_deterministic_for_a_key():
    key = "k" * 32
    first = AesCrypto(Algorithm.AES_CBC_256, key).encrypt("hand")
    second = AesCrypto(Algorithm.AES_CBC_256, key).encrypt("hand")
    assert first == second
    assert first != b"hand"


def test_different_keys_differ():
    one = AesCrypto(Algorithm.AES_CBC_128, b"a" * 16).encrypt(b"hand")
    two = AesCrypto(Algorithm.AES_CBC_128, b"b" * 16).encrypt(b"hand")
    assert one != two


@pytest.mark.parametrize("algorithm,size", [(Algorithm.AES_CBC_128, 15), (Algorithm.AES_ECB_192, 16), (Algorithm.AES_CTR_256, 24)])
def test_wrong_key_length_raises(algorithm, size):
    with pytest.raises(ValueError):
        AesCrypto(algorithm, b"k" * size)


def test_truncated_ciphertext_raises():
    crypto = AesCrypto(Algorithm.AES_CBC_256, b"s" * 32)
    cipher = crypto.encrypt(b"some text")
    with pytest.raises(ValueError):
        crypto.decrypt(cipher[:-1])