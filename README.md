# hqc

Pure-Python building blocks of HQC (Hamming Quasi-Cyclic), the code-based
post-quantum key encapsulation mechanism, following the v5.0.0 specification.
Only the standard library is needed.

| Module | What it provides |
| --- | --- |
| `hqc.gf` | GF(2^8) arithmetic over the polynomial `0x11D`: `gf_mul`, `gf_square`, `gf_inverse`, `gf_reduce`, `carryless_mul`, `trailing_zero_bits`, and the `GF_EXP` / `GF_LOG` tables from `build_exp_log_tables` |
| `hqc.params` | The `Params` dataclass, the `PARAMS_128`, `PARAMS_192` and `PARAMS_256` sets, `all_params()` and `ceil_div` |
| `hqc.parsing` | `load_words` / `store_words`: little-endian conversion between bytes and 64-bit words |
| `hqc.gf2x` | `base_mul`, `karatsuba`, `poly_reduce` and `poly_mul`: binary polynomial multiplication modulo `X^n - 1` |
| `hqc.fft` | The additive FFT over GF(2^8) (`fft`, `radix`, `compute_fft_betas`, `compute_subset_sums`) and `retrieve_error_poly` for locating roots |
| `hqc.reed_muller` | Duplicated RM(1,7) coding: `encode_word`, `rm_encode`, `rm_decode`, with `hadamard`, `expand_and_sum` and `find_peaks` |
| `hqc.shake` | `Shake256`, an incremental absorb (`write`) / squeeze (`read`) state with `reset` |
| `hqc.hashing` | The domain-separated hashes `hash_g`, `hash_h`, `hash_i`, `hash_j`, and `version()` |
| `hqc.errors` | The exception classes rooted at `HqcError` |

The code is not constant-time and is meant for study, testing and
test-vector work, not for protecting real secrets.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

### Field arithmetic

```python
from hqc.gf import gf_inverse, gf_mul, gf_square

a = 0x53
assert gf_mul(a, gf_inverse(a)) == 1
assert gf_square(a) == gf_mul(a, a)
assert gf_inverse(0) == 0  # by convention
```

### Parameter sets

```python
from hqc.params import all_params

for params in all_params():
    params.validate()          # raises ValueError if inconsistent
    print(params.name, params.n, params.vec_n_size64, params.multiplicity)
```

### Polynomial multiplication

```python
from hqc.gf2x import poly_mul
from hqc.params import PARAMS_128

size = PARAMS_128.vec_n_size64
a = [0] * size
a[0] = 0xCAFEBABE
one = [1] + [0] * (size - 1)
assert poly_mul(PARAMS_128, a, one) == a
```

### Reed-Muller coding

```python
from hqc.params import PARAMS_128
from hqc.reed_muller import rm_decode, rm_encode

message = bytes(range(PARAMS_128.n1))
codeword = rm_encode(PARAMS_128, message)   # list of vec_n1n2_size64 words
assert rm_decode(PARAMS_128, codeword) == message
```

### Hashing

```python
from hqc.hashing import hash_h, version
from hqc.shake import Shake256

digest = hash_h(b"public key bytes")   # SHA3-256 with domain byte 1
assert len(digest) == 32

xof = Shake256()
xof.write(b"seed material")
first = xof.read(32)
second = xof.read(32)   # continues the same output stream

print(version())  # "v5.0.0"
```

Writing to a `Shake256` after reading from it raises `RuntimeError`.

## Errors

`hqc.errors` defines `HqcError` and its subclasses `InvalidKeySizeError`,
`InvalidCiphertextSizeError`, `DestroyedKeyError` and `KeyMismatchError`.
No function in the package raises them yet; they are there for key and
ciphertext handling built on top of these modules.

## What this package does not do

It provides the arithmetic, coding and hashing layers only. It has no key
generation, encapsulation or decapsulation, no key objects or key
serialization, no Reed-Solomon encoder or decoder, no concatenated-code
layer and no fixed-weight vector sampling. There is no command-line tool.

## Status

This follows the HQC v5.0.0 specification (NIST round 4), not the future
FIPS 207 standard; sizes and encodings may change once that is published.