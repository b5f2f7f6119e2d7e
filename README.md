# sealedinfer

A small, dependency-free toolkit for decrypting AES-128 protected input data
and scoring multi-label predictions.

## What it provides

### `sealedinfer.aes`

AES-128 implemented in pure Python.

- `expand_key(key)` builds the 176-byte round-key schedule from a 16-byte key.
- `AesContext(key, iv=None)` holds the round keys and the running IV; when no
  IV is given it starts as sixteen zero bytes.
  - `ecb_encrypt(block)` / `ecb_decrypt(block)` work on exactly one 16-byte
    block.
  - `cbc_encrypt(data)` / `cbc_decrypt(data)` chain over data whose length is a
    multiple of 16 bytes. The context keeps the last IV, so successive calls
    continue the same stream.
  - `ctr_xcrypt(data)` encrypts and decrypts alike in counter mode, for data of
    any length. The counter is incremented once per 16-byte keystream block and
    carries over between calls; keystream left unused at the end of a call is
    discarded.
  - `set_iv(iv)` replaces the current IV or counter.

Keys, IVs and single blocks of the wrong length, and CBC data that is not
block-aligned, raise `ValueError`.

### `sealedinfer.metrics`

Scoring for multi-label outputs, where a score of 0.5 or more counts as a
positive prediction (`THRESHOLD`).

- `accuracy_any(predictions, labels)` is `1.0` when some class labelled `1` is
  predicted positive, else `0.0`.
- `accuracy_all(predictions, labels)` thresholds each prediction to 0 or 1 and
  counts how many equal their label; it is `1.0` when that count is exactly
  `LABEL_COUNT` (twelve), else `0.0`.

Both raise `ValueError` when `predictions` and `labels` differ in length.

## Installation

```
pip install .
```

## Example

```python
from sealedinfer.aes import AesContext
from sealedinfer.metrics import accuracy_any

key = bytes(16)          # placeholder key
iv = bytes(range(16))

sealed = AesContext(key, iv).cbc_encrypt(b"sixteen byte msg")
plain = AesContext(key, iv).cbc_decrypt(sealed)
assert plain == b"sixteen byte msg"

scores = [0.9, 0.1, 0.7]
labels = [1, 0, 0]
print(accuracy_any(scores, labels))  # 1.0
```

## What it does not do

- Only 128-bit keys are supported; there is no AES-192 or AES-256.
- There is no padding helper: data handed to CBC must already be padded to
  whole 16-byte blocks, and any padding must be removed by the caller.
- The package contains no inference network and no command-line tool; it only
  supplies the cipher and the scoring functions.

## Running the tests

```
pip install .[test]
pytest
```