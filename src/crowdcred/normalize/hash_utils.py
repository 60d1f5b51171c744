# src/crowdcred/normalize/hash_utils.py

import hashlib
import os
from typing import Union


def compute_sha256_from_file(
    file_path: Union[str, "os.PathLike[str]"], chunk_size: int = 65536
) -> str:
    """
    Compute the SHA-256 fingerprint of an uploaded photo incrementally.

    Args:
        file_path: Path to the photo
        chunk_size: Bytes to read at a time (default: 64KB)

    Returns:
        Hexadecimal SHA-256 hash string (64 lowercase chars).
    """
    sha256_hash = hashlib.sha256()
    with open(file_path, "rb") as f:
        for chunk in iter(lambda: f.read(chunk_size), b""):
            sha256_hash.update(chunk)
    return sha256_hash.hexdigest()
