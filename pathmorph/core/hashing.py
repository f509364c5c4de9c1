"""
hashing.py - File Content Digests
"""

import hashlib
import logging
from pathlib import Path
from typing import Optional, Union, TYPE_CHECKING

from .errors import UnsupportedAlgorithm

if TYPE_CHECKING:
    from .config import EngineConfig

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024        # 1MiB

# Accepted names -> hashlib names
ALGORITHMS = {
    "MD2": "md2",
    "MD5": "md5",
    "SHA-1": "sha1",
    "SHA-256": "sha256",
    "SHA-384": "sha384",
    "SHA-512": "sha512",
}


def _hashlib_name(algorithm: str) -> str:
    key = algorithm.strip().upper().replace("_", "-")
    if key.startswith("SHA") and not key.startswith("SHA-"):
        key = "SHA-" + key[3:]
    try:
        return ALGORITHMS[key]
    except KeyError:
        raise UnsupportedAlgorithm(algorithm) from None


def new_digest(algorithm: str):
    """Create a hashlib digest object for one of the accepted algorithm names"""
    try:
        return hashlib.new(_hashlib_name(algorithm))
    except ValueError:
        # Known name, but not compiled into this OpenSSL (MD2 usually)
        raise UnsupportedAlgorithm(algorithm) from None


def checksum(
    path: Union[str, Path],
    algorithm: Optional[str] = None,
    config: Optional["EngineConfig"] = None
) -> str:
    """
    Compute the digest of a file's contents

    Args:
        path: File to read
        algorithm: MD2, MD5, SHA-1, SHA-256, SHA-384 or SHA-512
        config: Supplies the default algorithm when none is given

    Returns:
        Lowercase hex digest
    """
    if algorithm is None:
        algorithm = config.hash_algorithm if config is not None else "SHA-256"

    digest = new_digest(algorithm)
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(CHUNK_SIZE), b""):
            digest.update(chunk)

    result = digest.hexdigest()
    logger.debug("%s(%s) = %s", algorithm, path, result)
    return result
