"""AES-128 block cipher with ECB, CBC and CTR modes of operation."""

from __future__ import annotations

BLOCK_SIZE = 16
KEY_SIZE = 16
EXPANDED_KEY_SIZE = 176

_NB = 4
_NK = 4
_NR = 10

_SBOX = bytes.fromhex(
    "637c777bf26b6fc53001672bfed7ab76"
    "ca82c97dfa5947f0add4a2af9ca472c0"
    "b7fd9326363ff7cc34a5e5f171d83115"
    "04c723c31896059a071280e2eb27b275"
    "09832c1a1b6e5aa0523bd6b329e32f84"
    "53d100ed20fcb15b6acbbe394a4c58cf"
    "d0efaafb434d338545f9027f503c9fa8"
    "51a3408f929d38f5bcb6da2110fff3d2"
    "cd0c13ec5f974417c4a77e3d645d1973"
    "60814fdc222a908846eeb814de5e0bdb"
    "e0323a0a4906245cc2d3ac629195e479"
    "e7c8376d8dd54ea96c56f4ea657aae08"
    "ba78252e1ca6b4c6e8dd741f4bbd8b8a"
    "703eb5664803f60e613557b986c11d9e"
    "e1f8981169d98e949b1e87e9ce5528df"
    "8ca1890dbfe6426841992d0fb054bb16"
)

_RSBOX = bytes(_SBOX.index(value) for value in range(256))

_RCON = (0x8D, 0x01, 0x02, 0x04, 0x08, 0x10, 0x20, 0x40, 0x80, 0x1B, 0x36)


def _xtime(x: int) -> int:
    return ((x << 1) ^ (((x >> 7) & 1) * 0x1B)) & 0xFF


def _multiply(x: int, y: int) -> int:
    result = 0
    while y:
        if y & 1:
            result ^= x
        x = _xtime(x)
        y >>= 1
    return result


_MUL9 = bytes(_multiply(x, 0x09) for x in range(256))
_MUL11 = bytes(_multiply(x, 0x0B) for x in range(256))
_MUL13 = bytes(_multiply(x, 0x0D) for x in range(256))
_MUL14 = bytes(_multiply(x, 0x0E) for x in range(256))


def _require_length(name: str, data: bytes, length: int) -> bytes:
    data = bytes(data)
    if len(data) != length:
        raise ValueError(f"{name} must be {length} bytes, got {len(data)}")
    return data


def expand_key(key: bytes) -> bytes:
    """Return the 176-byte AES-128 key schedule for a 16-byte key."""
    key = _require_length("key", key, KEY_SIZE)
    words = [list(key[i:i + 4]) for i in range(0, KEY_SIZE, 4)]
    for i in range(_NK, _NB * (_NR + 1)):
        temp = list(words[i - 1])
        if i % _NK == 0:
            temp = temp[1:] + temp[:1]
            temp = [_SBOX[b] for b in temp]
            temp[0] ^= _RCON[i // _NK]
        words.append([a ^ b for a, b in zip(words[i - _NK], temp)])
    return bytes(b for word in words for b in word)


def _add_round_key(state: list[int], round_key: bytes, round_no: int) -> None:
    offset = round_no * _NB * 4
    for i, k in enumerate(round_key[offset:offset + BLOCK_SIZE]):
        state[i] ^= k


def _shift_rows(state: list[int]) -> list[int]:
    return [state[((c + r) % 4) * 4 + r] for c in range(4) for r in range(4)]


def _inv_shift_rows(state: list[int]) -> list[int]:
    return [state[((c - r) % 4) * 4 + r] for c in range(4) for r in range(4)]


def _mix_columns(state: list[int]) -> None:
    for c in range(0, 16, 4):
        a0, a1, a2, a3 = state[c:c + 4]
        total = a0 ^ a1 ^ a2 ^ a3
        state[c] ^= _xtime(a0 ^ a1) ^ total
        state[c + 1] ^= _xtime(a1 ^ a2) ^ total
        state[c + 2] ^= _xtime(a2 ^ a3) ^ total
        state[c + 3] ^= _xtime(a3 ^ a0) ^ total


def _inv_mix_columns(state: list[int]) -> None:
    for c in range(0, 16, 4):
        a, b, cc, d = state[c:c + 4]
        state[c] = _MUL14[a] ^ _MUL11[b] ^ _MUL13[cc] ^ _MUL9[d]
        state[c + 1] = _MUL9[a] ^ _MUL14[b] ^ _MUL11[cc] ^ _MUL13[d]
        state[c + 2] = _MUL13[a] ^ _MUL9[b] ^ _MUL14[cc] ^ _MUL11[d]
        state[c + 3] = _MUL11[a] ^ _MUL13[b] ^ _MUL9[cc] ^ _MUL14[d]


def _cipher(block: bytes, round_key: bytes) -> bytes:
    state = list(block)
    _add_round_key(state, round_key, 0)
    for round_no in range(1, _NR + 1):
        state = _shift_rows([_SBOX[b] for b in state])
        if round_no == _NR:
            break
        _mix_columns(state)
        _add_round_key(state, round_key, round_no)
    _add_round_key(state, round_key, _NR)
    return bytes(state)


def _inv_cipher(block: bytes, round_key: bytes) -> bytes:
    state = list(block)
    _add_round_key(state, round_key, _NR)
    for round_no in range(_NR - 1, -1, -1):
        state = [_RSBOX[b] for b in _inv_shift_rows(state)]
        _add_round_key(state, round_key, round_no)
        if round_no == 0:
            break
        _inv_mix_columns(state)
    return bytes(state)


def _xor(a: bytes, b: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(a, b))


def _increment(counter: bytes) -> bytes:
    value = (int.from_bytes(counter, "big") + 1) % (1 << (8 * BLOCK_SIZE))
    return value.to_bytes(BLOCK_SIZE, "big")


class AesContext:
    """An AES-128 key schedule together with the chaining IV or counter.

    CBC and CTR operations update ``iv`` so that consecutive calls continue
    the same stream.
    """

    def __init__(self, key: bytes, iv: bytes | None = None) -> None:
        self.round_key = expand_key(key)
        self.iv = bytes(BLOCK_SIZE) if iv is None else _require_length("iv", iv, BLOCK_SIZE)

    def set_iv(self, iv: bytes) -> None:
        """Replace the IV (or counter) used by CBC and CTR modes."""
        self.iv = _require_length("iv", iv, BLOCK_SIZE)

    def ecb_encrypt(self, block: bytes) -> bytes:
        """Encrypt exactly one 16-byte block."""
        return _cipher(_require_length("block", block, BLOCK_SIZE), self.round_key)

    def ecb_decrypt(self, block: bytes) -> bytes:
        """Decrypt exactly one 16-byte block."""
        return _inv_cipher(_require_length("block", block, BLOCK_SIZE), self.round_key)

    @staticmethod
    def _blocks(data: bytes):
        data = bytes(data)
        if len(data) % BLOCK_SIZE:
            raise ValueError(
                f"data length must be a multiple of {BLOCK_SIZE}, got {len(data)}"
            )
        return (data[i:i + BLOCK_SIZE] for i in range(0, len(data), BLOCK_SIZE))

    def cbc_encrypt(self, data: bytes) -> bytes:
        """Encrypt block-aligned data in CBC mode, chaining from ``iv``."""
        out = []
        for block in self._blocks(data):
            self.iv = _cipher(_xor(block, self.iv), self.round_key)
            out.append(self.iv)
        return b"".join(out)

    def cbc_decrypt(self, data: bytes) -> bytes:
        """Decrypt block-aligned data in CBC mode, chaining from ``iv``."""
        out = []
        for block in self._blocks(data):
            out.append(_xor(_inv_cipher(block, self.round_key), self.iv))
            self.iv = block
        return b"".join(out)

    def ctr_xcrypt(self, data: bytes) -> bytes:
        """Encrypt or decrypt data of any length in CTR mode.

        The counter in ``iv`` is incremented once per keystream block; any
        unused keystream at the end of a call is discarded.
        """
        data = bytes(data)
        out = bytearray()
        for start in range(0, len(data), BLOCK_SIZE):
            keystream = _cipher(self.iv, self.round_key)
            self.iv = _increment(self.iv)
            out += _xor(data[start:start + BLOCK_SIZE], keystream)
        return bytes(out)