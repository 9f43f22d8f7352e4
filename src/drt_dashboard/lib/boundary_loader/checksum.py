"""SHA512 checksum verification for boundary dataset files."""

import hashlib
from pathlib import Path

from loguru import logger

# Read buffer size for hashing large files
_CHUNK_SIZE = 8192


def compute_sha512(file_path: Path) -> str:
    """Return the lowercase hex SHA512 digest of a file."""
    sha512 = hashlib.sha512()
    with file_path.open("rb") as f:
        while chunk := f.read(_CHUNK_SIZE):
            sha512.update(chunk)
    return sha512.hexdigest().lower()


def verify_sha512(file_path: Path, expected_hash: str | None = None) -> bool:
    """Verify a boundary dataset's SHA512 checksum.

    The expected digest comes from ``expected_hash`` when given, otherwise
    from a companion ``<file_path>.sha512.txt`` holding a line in the format
    ``<hash>  <filename>`` (GNU coreutils style).

    Args:
        file_path: Path to the file to verify.
        expected_hash: Optional digest to compare against.

    Returns:
        True if the checksum matches or no checksum is available.

    Raises:
        ValueError: If the checksum does not match.
    """
    if expected_hash is None:
        checksum_path = file_path.parent / f"{file_path.name}.sha512.txt"
        if not checksum_path.exists():
            logger.warning(f"No checksum file found for {file_path.name}, skipping verification")
            return True
        expected_hash = checksum_path.read_text().strip().split()[0]

    expected_hash = expected_hash.lower()
    actual_hash = compute_sha512(file_path)

    if actual_hash != expected_hash:
        msg = f"SHA512 mismatch for {file_path.name}: expected {expected_hash[:16]}..., got {actual_hash[:16]}..."
        raise ValueError(msg)

    logger.debug(f"SHA512 verified for {file_path.name}")
    return True
