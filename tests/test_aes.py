import pytest

from sealedinfer.aes import AesContext, expand_key

KEY = bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c")
PLAIN = [
    bytes.fromhex("6bc1bee22e409f96e93d7e117393172a"),
    bytes.fromhex("ae2d8a571e03ac9c9eb76fac45af8e51"),
    bytes.fromhex("30c81c46a35ce411e5fbc1191a0a52ef"),
    bytes.fromhex("f69f2445df4f9b17ad2b417be66c3710"),
]
ECB_CIPHER = [
    bytes.fromhex("3ad77bb40d7a3660a89ecaf32466ef97"),
    bytes.fromhex("f5d3d58503b9699de785895a96fdbaaf"),
    bytes.fromhex("43b1cd7f598ece23881b00e3ed030688"),
    bytes.fromhex("7b0c785e27e8ad3f8223207104725dd4"),
]
IV = bytes(range(16))


def test_expand_key_shape():
    schedule = expand_key(KEY)
    assert len(schedule) == 176
    assert schedule[:16] == KEY


def test_expand_key_rejects_bad_length():
    with pytest.raises(ValueError):
        expand_key(b"\x00" * 15)


@pytest.mark.parametrize("plain,cipher", list(zip(PLAIN, ECB_CIPHER)))
def test_ecb_vectors(plain, cipher):
    ctx = AesContext(KEY)
    assert ctx.ecb_encrypt(plain) == cipher
    assert ctx.ecb_decrypt(cipher) == plain


def test_ecb_rejects_wrong_block_size():
    ctx = AesContext(KEY)
    with pytest.raises(ValueError):
        ctx.ecb_encrypt(b"\x00" * 17)
    with pytest.raises(ValueError):
        ctx.ecb_decrypt(b"\x00" * 3)


def test_cbc_known_first_block():
    ctx = AesContext(KEY, IV)
    assert ctx.cbc_encrypt(PLAIN[0]) == bytes.fromhex("7649abac8119b246cee98e9b12e9197d")


def test_cbc_zero_iv_single_block_matches_ecb():
    ctx = AesContext(KEY, bytes(16))
    assert ctx.cbc_encrypt(PLAIN[0]) == ECB_CIPHER[0]


def test_cbc_round_trip():
    data = b"".join(PLAIN)
    cipher = AesContext(KEY, IV).cbc_encrypt(data)
    assert cipher != data
    assert AesContext(KEY, IV).cbc_decrypt(cipher) == data


def test_cbc_chaining_across_calls():
    data = b"".join(PLAIN)
    whole = AesContext(KEY, IV).cbc_encrypt(data)
    ctx = AesContext(KEY, IV)
    pieces = ctx.cbc_encrypt(data[:32]) + ctx.cbc_encrypt(data[32:])
    assert pieces == whole
    assert ctx.iv == whole[-16:]


def test_cbc_decrypt_chaining_across_calls():
    data = b"".join(PLAIN)
    cipher = AesContext(KEY, IV).cbc_encrypt(data)
    ctx = AesContext(KEY, IV)
    assert ctx.cbc_decrypt(cipher[:16]) + ctx.cbc_decrypt(cipher[16:]) == data


def test_cbc_rejects_unaligned():
    ctx = AesContext(KEY, IV)
    with pytest.raises(ValueError):
        ctx.cbc_encrypt(b"\x00" * 20)
    with pytest.raises(ValueError):
        ctx.cbc_decrypt(b"\x00" * 31)


def test_ctr_known_first_block():
    counter = bytes.fromhex("f0f1f2f3f4f5f6f7f8f9fafbfcfdfeff")
    ctx = AesContext(KEY, counter)
    assert ctx.ctr_xcrypt(PLAIN[0]) == bytes.fromhex("874d6191b620e3261bef6864990db6ce")


def test_ctr_round_trip_arbitrary_length():
    data = b"an odd-length message for counter mode"
    cipher = AesContext(KEY, IV).ctr_xcrypt(data)
    assert len(cipher) == len(data)
    assert AesContext(KEY, IV).ctr_xcrypt(cipher) == data


def test_ctr_keystream_is_encrypted_counter():
    ctx = AesContext(KEY, IV)
    assert ctx.ctr_xcrypt(bytes(16)) == AesContext(KEY).ecb_encrypt(IV)


def test_ctr_counter_wraps():
    ctx = AesContext(KEY, b"\xff" * 16)
    ctx.ctr_xcrypt(bytes(16))
    assert ctx.iv == bytes(16)


def test_ctr_counter_advances_per_block():
    ctx = AesContext(KEY, bytes(16))
    ctx.ctr_xcrypt(bytes(17))
    assert ctx.iv == bytes(15) + b"\x02"


def test_set_iv_resets_stream():
    ctx = AesContext(KEY, IV)
    first = ctx.cbc_encrypt(PLAIN[0])
    ctx.set_iv(IV)
    assert ctx.cbc_encrypt(PLAIN[0]) == first


def test_bad_iv_rejected():
    with pytest.raises(ValueError):
        AesContext(KEY, b"\x00" * 8)
    ctx = AesContext(KEY)
    with pytest.raises(ValueError):
        ctx.set_iv(b"\x00" * 17)


def test_default_iv_is_zero():
    assert AesContext(KEY).iv == bytes(16)