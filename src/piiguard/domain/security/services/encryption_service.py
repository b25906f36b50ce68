"""Field encryption service interface for the Security domain."""

from abc import ABC, abstractmethod


class FieldEncryptionService(ABC):
    """Domain service interface for encrypting PII columns.

    ``encrypt`` is randomized: two calls with the same plaintext return
    different envelopes. ``hash_for_search`` is deterministic and is the
    only way to look up a row by an encrypted value.
    """

    @abstractmethod
    def encrypt(self, plaintext: str | None) -> str | None:
        """
        Encrypt a text field into an envelope string.

        Parameters
        ----------
        plaintext
            The sensitive value to encrypt. Empty or ``None`` values are
            returned unchanged.

        Returns
        -------
        The envelope ``"<ivhex>:<cipherhex>"``

        Raises
        ------
        EncryptionError
            If encryption fails
        """

    @abstractmethod
    def decrypt(self, envelope: str | None) -> str | None:
        """
        Decrypt an envelope string back to plaintext.

        Parameters
        ----------
        envelope
            The stored envelope. Empty or ``None`` values are returned
            unchanged.

        Returns
        -------
        Decrypted plaintext string

        Raises
        ------
        MalformedEnvelopeError
            If the envelope is not ``<ivhex>:<cipherhex>``
        DecryptionError
            If decryption fails (wrong key, truncated or tampered data)
        """

    @abstractmethod
    def hash_for_search(self, plaintext: str) -> str:
        """
        Compute the deterministic lookup digest of a value.

        Parameters
        ----------
        plaintext
            The value to digest

        Returns
        -------
        Lowercase hex digest, identical for identical inputs
        """
