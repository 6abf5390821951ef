# classiciphers

Plain-Python implementations of classical pen-and-paper ciphers. Each cipher
lives in its own module and works on ordinary strings. The package has no
dependencies beyond the standard library.

These ciphers are of historical and teaching interest only. None of them
protects data against a modern attacker.

## Ciphers

Substitution ciphers:

| Module | Functions |
| --- | --- |
| `classiciphers.caesar` | `encrypt(text, shift)`, `decrypt(text, shift)` |
| `classiciphers.affine` | `encrypt(text, a, b)`, `decrypt(text, a, b)`, `mod_inverse(a, m)` |
| `classiciphers.atbash` | `atbash(text)` (applies in both directions) |
| `classiciphers.august` | `encrypt(text)`, `decrypt(text)` (shift of one) |
| `classiciphers.autokey` | `encrypt(text, key)`, `decrypt(text, key)` |
| `classiciphers.beaufort` | `beaufort(text, key)` (applies in both directions) |
| `classiciphers.gronsfeld` | `encrypt(text, key)`, `decrypt(text, key)` with a digit key |
| `classiciphers.runningkey` | `encrypt(text, key)`, `decrypt(text, key)` |
| `classiciphers.vigenere` | `extend_key(text, keyword)`, `encrypt(text, key)`, `decrypt(text, key)` |
| `classiciphers.hill` | `encrypt(text, key)`, `decrypt(text, key)`, `determinant(key)`, `adjugate(key)`, `is_valid_key(key)`, `mod_inverse(a, m)` |

Transposition ciphers:

| Module | Functions |
| --- | --- |
| `classiciphers.myszkowski` | `preprocess(text)`, `key_order(key)`, `encrypt(plaintext, key)`, `decrypt(ciphertext, key)` |
| `classiciphers.railfence` | `encrypt(text, rails)`, `decrypt(cipher, rails)` |
| `classiciphers.route` | `encrypt(text, rows, cols)`, `decrypt(cipher, rows, cols)` (spiral route) |

## Behaviour worth knowing

- The letter-substituting ciphers (Caesar, affine, Atbash, August, autokey,
  Beaufort, Gronsfeld, running key, Vigenère) act on the ASCII letters A–Z
  and a–z only. They keep each letter's case and pass spaces, digits and
  punctuation through unchanged.
- In the autokey, Beaufort, running-key and Vigenère ciphers the key advances
  on every character of the text, symbols included.
- `vigenere.extend_key` repeats the keyword to the length of the text; a
  keyword already at least that long is returned whole.
- Autokey uses the key followed by the plaintext itself as its key stream.
- The Gronsfeld key must be a non-empty string of decimal digits; the
  running key must be at least as long as the text. Otherwise `ValueError`
  is raised.
- The Hill cipher keeps only letters, upper-cases them and pads odd-length
  text with `X`. `decrypt` raises `ValueError` when the key's determinant has
  no inverse modulo 26.
- The Myszkowski functions do not clean their input; call `preprocess` first
  to drop everything but letters and upper-case the rest. Columns are read in
  the alphabetical order of the key letters, equal letters from left to
  right, and the grid is padded with `X`. `decrypt` returns text as long as
  the ciphertext. A key with anything other than letters raises `ValueError`.
- The rail fence cipher needs at least one rail.
- The route cipher fills a `rows` × `cols` grid row by row and reads it in a
  spiral starting at the top-left corner: down, right, up, left. Only the
  first `rows * cols` characters are used; shorter text raises `ValueError`.

## Examples

```python
from classiciphers import atbash, caesar, railfence, vigenere

caesar.encrypt("Hello, World!", 3)        # 'Khoor, Zruog!'
caesar.decrypt("Khoor, Zruog!", 3)        # 'Hello, World!'

atbash.atbash("Hello")                    # 'Svool'

key = vigenere.extend_key("ATTACKATDAWN", "LEMON")
vigenere.encrypt("ATTACKATDAWN", key)     # 'LXFOPVEFRNHR'

railfence.encrypt("WEAREDISCOVEREDFLEEATONCE", 3)
# 'WECRLTEERDSOEEFEAOCAIVDEN'
```

The affine cipher needs a multiplier `a` that is coprime with 26. Decryption
raises `ValueError` when `a` has no inverse modulo 26:

```python
from classiciphers import affine

affine.encrypt("AFFINE CIPHER", 5, 8)     # 'IHHWVC SWFRCP'
affine.decrypt("IHHWVC SWFRCP", 5, 8)     # 'AFFINE CIPHER'
```

The Hill cipher takes a 2×2 matrix of numbers from 0 to 25 whose determinant
is coprime with 26:

```python
from classiciphers import hill

key = [[3, 3], [2, 5]]
hill.is_valid_key(key)                    # True
hill.encrypt("help", key)                 # 'HIAT'
hill.decrypt("HIAT", key)                 # 'HELP'
```

## What the package does not do

It is a library only: there is no command-line tool and nothing reads from
standard input. It does not read or write files, and it offers no
cryptanalysis or key search.

## Running the tests

Install the package with its `test` extra, then run `pytest` from the project
root.