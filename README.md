# classicrypt

Classical ciphers (Caesar, Vigenère, affine), tools to break them by
frequency analysis, small number-theory helpers, and a toy
learning-with-errors (LWE) public-key scheme that encrypts bit strings.

These ciphers are for study and teaching. They do not protect anything.

## Installation

```
pip install .
```

## Commands

Every command returns exit status 0 on success and 1 on a usage error,
a missing file or invalid input.

### `cipher`: encrypt or decrypt text given on the command line

```
cipher caesar encrypt "attack at dawn"
cipher vigenere decrypt "LXFOPVEFRNHR"
cipher affine encrypt "hello"
```

The key is asked for on standard input. Caesar takes an integer,
Vigenère a word, affine a pair `a,b` where `a` must be coprime with 26.
Ciphertext comes out in upper case, plaintext in lower case, and
anything that is not a letter is dropped.

### `fcipher`: encrypt or decrypt a file

```
fcipher caesar encrypt message.txt     # writes message.enc
fcipher caesar decrypt message.enc     # writes message.dec
fcipher lattice keygen mykey           # writes mykey.pk and mykey.sk
fcipher lattice encrypt bits.txt       # asks for the public key file, writes bits.txt.enc
fcipher lattice decrypt bits.txt.enc   # asks for the private key file, writes bits.txt.enc.dec
```

Line breaks in the input file are read as spaces. For the classical
ciphers the file's extension is replaced by `.enc` or `.dec`. The
lattice scheme encrypts only the `0` and `1` characters found in the
input file. It uses n = 512, m = 1024, q = 4093 and σ = 3.19. Key and
ciphertext files hold 32-bit little-endian integers.

### `crypta`: break a ciphertext stored in a file

```
crypta caesar cipher.txt     # mutual index of coincidence against English
crypta bcaesar cipher.txt    # print every Caesar shift
crypta vigenere cipher.txt   # Friedman estimate, then per-column analysis
crypta affine cipher.txt     # try every valid affine key
```

### `crypto-tool`: number-theory and text helpers

```
crypto-tool findkey              # affine key from two plaintext/ciphertext letter pairs
crypto-tool minverse 7 26        # modular inverse
crypto-tool mtable 7             # multiplication table mod 7
crypto-tool frequency text.txt   # letter frequencies and index of coincidence
crypto-tool soc 2 3 3 5          # solve x ≡ 2 (mod 3), x ≡ 3 (mod 5)
crypto-tool phi 36               # Euler's totient
crypto-tool fme 3 200 7          # 3^200 mod 7
```

`findkey` asks for two lower-case plaintext letters and the two
ciphertext letters they map to.

## Library use

```python
from classicrypt.classical import vigenere_encrypt, vigenere_decrypt
from classicrypt.textstats import frequency, index_of_coincidence
from classicrypt.numtheory import mod_inverse, totient
from classicrypt.lattice import LWE

ct = vigenere_encrypt("attack at dawn", "lemon")   # "LXFOPVEFRNHR"
vigenere_decrypt(ct, "lemon")                      # "attackatdawn"

index_of_coincidence(frequency("some english text"))
mod_inverse(7, 26)                                 # 15
totient(36)                                        # 12

engine = LWE(64, 128, 4093, 3.19, seed=1)
pair = engine.keygen()
engine.decrypt(pair[1], engine.encrypt(pair[0], 1))   # 1
```

The modules:

- `classicrypt.classical`: `caesar_encrypt`, `caesar_decrypt`,
  `vigenere_encrypt`, `vigenere_decrypt`, `affine_encrypt`, `affine_decrypt`.
- `classicrypt.textstats`: `frequency`, `english_frequency`,
  `language_frequency`, `most_common`, `index_of_coincidence`,
  `mutual_index_of_coincidence`, `shift`, `substring`, `read_text`.
- `classicrypt.numtheory`: `gcd`, `mod_inverse`, `mod_inverse_recursive`,
  `extended_coefficients`, `affine_key`, `is_number`, `solve_congruences`,
  `prime_factors`, `totient`, `modular_exponentiation`,
  `fast_modular_exponentiation`.
- `classicrypt.lattice`: `LWE`, `PublicKey`, `PrivateKey`, `CipherText`,
  and `save_public_key`, `load_public_key`, `save_private_key`,
  `load_private_key`, `write_ciphertexts`, `read_ciphertexts` for files.
- `classicrypt.crypta`: `analyze_caesar`, `brute_force_caesar`,
  `friedman_key_length`, `analyze_vigenere`, `analyze_affine`.

## What it does not do

The lattice scheme is a toy: its parameters are fixed and small, and it
encrypts one bit per ciphertext. Only English reference frequencies are
built in, so the cryptanalysis commands assume English plaintext.