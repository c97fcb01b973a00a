"""
Cryptographic signers for GitHub App authentication.

GitHub Apps authenticate with RS256 JWTs, so only RSA is supported.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa


class Signer(ABC):
    """Abstract base class for JWT signers."""

    algorithm: str

    @abstractmethod
    def sign(self, message: bytes) -> bytes:
        """Sign a message and return the signature bytes."""
        pass

    @classmethod
    @abstractmethod
    def from_pem_file(cls, path: str | Path) -> "Signer":
        """Load a signer from a PEM file."""
        pass

    @classmethod
    @abstractmethod
    def from_pem(cls, pem_string: str) -> "Signer":
        """Load a signer from a PEM string."""
        pass


class RS256Signer(Signer):
    """RSASSA-PKCS1-v1_5 with SHA-256, as required for GitHub App JWTs."""

    algorithm = "RS256"

    def __init__(self, private_key: rsa.RSAPrivateKey) -> None:
        """
        Initialize with an RSA private key.

        Args:
            private_key: RSA private key from cryptography library
        """
        self._private_key = private_key
        self._public_key = private_key.public_key()

    def sign(self, message: bytes) -> bytes:
        """
        Sign a message using RS256.

        Args:
            message: The message bytes to sign

        Returns:
            Signature bytes (key size / 8 long)
        """
        return self._private_key.sign(message, padding.PKCS1v15(), hashes.SHA256())

    def public_key_pem(self) -> str:
        """Return the public key in PEM format."""
        return self._public_key.public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        ).decode()

    def private_key_pem(self) -> str:
        """Return the private key in PEM format (for storage)."""
        return self._private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        ).decode()

    @classmethod
    def from_pem_file(cls, path: str | Path) -> "RS256Signer":
        """
        Load a signer from a PEM file.

        GitHub hands out App private keys as PKCS#1 PEM files; PKCS#8 also
        works.

        Args:
            path: Path to PEM file containing an RSA private key

        Returns:
            RS256Signer instance
        """
        path = Path(path)
        return cls._load(path.read_bytes())

    @classmethod
    def from_pem(cls, pem_string: str) -> "RS256Signer":
        """
        Load a signer from a PEM string.

        Args:
            pem_string: PEM-encoded RSA private key

        Returns:
            RS256Signer instance
        """
        return cls._load(pem_string.encode())

    @classmethod
    def _load(cls, pem_data: bytes) -> "RS256Signer":
        private_key = serialization.load_pem_private_key(pem_data, password=None)

        if not isinstance(private_key, rsa.RSAPrivateKey):
            raise TypeError(f"Expected RSA private key, got {type(private_key).__name__}")

        return cls(private_key)

    @classmethod
    def generate(cls, key_size: int = 2048) -> "RS256Signer":
        """
        Generate a new RSA keypair (for testing purposes).

        Args:
            key_size: Modulus size in bits

        Returns:
            RS256Signer instance
        """
        private_key = rsa.generate_private_key(public_exponent=65537, key_size=key_size)
        return cls(private_key)

    def verify(self, signature: bytes, message: bytes) -> bool:
        """
        Verify a signature (for testing purposes).

        Args:
            signature: The signature to verify
            message: The original message

        Returns:
            True if valid, False otherwise
        """
        try:
            self._public_key.verify(signature, message, padding.PKCS1v15(), hashes.SHA256())
            return True
        except InvalidSignature:
            return False
