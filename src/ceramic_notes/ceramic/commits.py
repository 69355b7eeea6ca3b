"""dag-jose commit encoding.

A signed commit is the dag-cbor block of the commit plus a JWS whose payload
is that block's CID, serialized for the HTTP API as
``{"jws": {payload, signatures, link}, "linkedBlock": <base64 block>}``.
Links to earlier commits (``prev``, ``id``) are CIDs inside the block.
"""

from typing import Any

import dag_cbor
from multiformats import CID, multibase, multihash

from ceramic_notes.protocols import SignerProtocol


def base64_string(data: bytes) -> str:
    """Unpadded standard base64, the multibase ``m`` encoding without its prefix."""
    return multibase.encode(data, "base64")[1:]


def block_cid(block: bytes) -> CID:
    return CID("base32", 1, "dag-cbor", multihash.digest(block, "sha2-256"))


def encode_block(commit: dict[str, Any]) -> tuple[CID, bytes]:
    """Encode ``commit`` as dag-cbor; return its CID and the block bytes."""
    block = dag_cbor.encode(commit)
    return block_cid(block), block


def link(cid: str) -> CID:
    """Parse a commit CID as reported in a stream log."""
    return CID.decode(cid)


def signed_commit(signer: SignerProtocol, commit: dict[str, Any]) -> dict[str, Any]:
    """Sign ``commit`` and serialize it for the node."""
    cid, block = encode_block(commit)
    jws = signer.sign(bytes(cid))
    return {"jws": {**jws, "link": str(cid)}, "linkedBlock": base64_string(block)}
