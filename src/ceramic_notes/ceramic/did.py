"""``did:key`` identity backed by an Ed25519 seed."""

from typing import Any

from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat
from jwt.api_jws import PyJWS
from loguru import logger
from multiformats import multibase, multicodec

from ceramic_notes.config import SEED_LENGTH
from ceramic_notes.errors import AuthError

DID_KEY_PREFIX = "did:key:"
JWS_ALGORITHM = "EdDSA"


def did_from_public_key(public_key: bytes) -> str:
    """Encode an Ed25519 public key as a ``did:key`` identifier (base58btc multibase)."""
    multikey = multicodec.wrap("ed25519-pub", public_key)
    return DID_KEY_PREFIX + multibase.encode(multikey, "base58btc")


class KeyDidProvider:
    """Signs commits as the ``did:key`` identity derived from a 32-byte seed."""

    def __init__(self, seed: bytes) -> None:
        self._seed = seed
        self._private_key: Ed25519PrivateKey | None = None
        self._did: str | None = None
        self._jws = PyJWS(algorithms=[JWS_ALGORITHM])

    @property
    def id(self) -> str:
        if self._did is None:
            msg = "DID is not authenticated"
            raise AuthError(msg)
        return self._did

    def authenticate(self) -> str:
        """Derive the key pair from the seed; return the DID."""
        if len(self._seed) != SEED_LENGTH:
            msg = f"Seed must be {SEED_LENGTH} bytes, got {len(self._seed)}"
            raise AuthError(msg)
        self._private_key = Ed25519PrivateKey.from_private_bytes(self._seed)
        public_key = self._private_key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)
        self._did = did_from_public_key(public_key)
        logger.debug("Authenticated as {}", self._did)
        return self._did

    def sign(self, payload: bytes) -> dict[str, Any]:
        """Return a general-serialization JWS over ``payload``."""
        if self._private_key is None:
            msg = "DID is not authenticated"
            raise AuthError(msg)
        did = self.id
        token = self._jws.encode(
            payload,
            self._private_key,
            algorithm=JWS_ALGORITHM,
            headers={"kid": f"{did}#{did[len(DID_KEY_PREFIX):]}", "typ": None},
        )
        protected, encoded_payload, signature = token.split(".")
        return {
            "payload": encoded_payload,
            "signatures": [{"protected": protected, "signature": signature}],
        }
