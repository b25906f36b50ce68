"""AES-256-CBC field encryption service implementation.

Envelope wire format: ``"<32 hex chars IV>:<hex ciphertext>"``.
The key is derived from the secret with scrypt (N=2**14, r=8, p=1) and the
fixed salt ``b"salt"``, so envelopes are interchangeable with any other
producer using the same parameters.
"""

import hashlib
import os

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.kdf.scrypt import Scrypt

from piiguard.domain.security.exceptions import (
    DecryptionError,
    EncryptionError,
    MalformedEnvelopeError,
)
from piiguard.domain.security.services import FieldEncryptionService


class AesCbcFieldEncryptionService(FieldEncryptionService):
    """AES-256-CBC encryption with a fresh random IV per call."""

    SEPARATOR = ":"
    IV_SIZE = 16
    KEY_SIZE = 32
    KEY_SALT = b"salt"
    SCRYPT_N = 2**14
    SCRYPT_R = 8
    SCRYPT_P = 1

    def __init__(self, secret_key: str):
        if not secret_key:
            msg = "Encryption secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        # Static secret and salt: the derived key never changes
        self._key = self._derive_key(secret_key)

    def encrypt(self, plaintext: str | None) -> str | None:
        if not plaintext:
            return plaintext

        iv = os.urandom(self.IV_SIZE)
        try:
            padder = padding.PKCS7(algorithms.AES.block_size).padder()
            padded = padder.update(plaintext.encode("utf-8")) + padder.finalize()
            encryptor = Cipher(algorithms.AES(self._key), modes.CBC(iv)).encryptor()
            ciphertext = encryptor.update(padded) + encryptor.finalize()
        except Exception as e:
            msg = f"Encryption failed: {e}"
            raise EncryptionError(msg) from e

        return f"{iv.hex()}{self.SEPARATOR}{ciphertext.hex()}"

    def decrypt(self, envelope: str | None) -> str | None:
        if not envelope:
            return envelope

        iv_hex, _, ciphertext_hex = envelope.partition(self.SEPARATOR)
        if not iv_hex or not ciphertext_hex:
            msg = "Invalid encrypted data format"
            raise MalformedEnvelopeError(msg)

        try:
            iv = bytes.fromhex(iv_hex)
            ciphertext = bytes.fromhex(ciphertext_hex)
        except ValueError as e:
            msg = "Invalid encrypted data format: not hex encoded"
            raise MalformedEnvelopeError(msg) from e

        try:
            decryptor = Cipher(algorithms.AES(self._key), modes.CBC(iv)).decryptor()
            padded = decryptor.update(ciphertext) + decryptor.finalize()
            unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
            plaintext = unpadder.update(padded) + unpadder.finalize()
            return plaintext.decode("utf-8")
        except ValueError as e:
            msg = "Decryption failed: wrong key, truncated or tampered data"
            raise DecryptionError(msg) from e

    def hash_for_search(self, plaintext: str) -> str:
        digest = hashlib.sha256((plaintext + self._secret_key).encode("utf-8"))
        return digest.hexdigest()

    @classmethod
    def _derive_key(cls, secret_key: str) -> bytes:
        kdf = Scrypt(
            salt=cls.KEY_SALT,
            length=cls.KEY_SIZE,
            n=cls.SCRYPT_N,
            r=cls.SCRYPT_R,
            p=cls.SCRYPT_P,
        )
        return kdf.derive(secret_key.encode("utf-8"))
