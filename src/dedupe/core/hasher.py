"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements streaming content hashing with pluggable hash algorithms.

Files are read in fixed-size chunks so arbitrarily large files never need to be
resident in memory. Digests are returned as lowercase hex strings.
"""

import hashlib
import logging

import xxhash

from dedupe.core.models import HashAlgorithmName
from dedupe.core.interfaces import Hasher, HashAlgorithm, HashState
from dedupe.errors import HashingError

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 1024 * 1024  # 1 MiB


# Use the same way to implement and use any other hashing algorithm
class Sha1AlgorithmImpl(HashAlgorithm):
    name = "sha1"

    @staticmethod
    def new() -> HashState:
        return hashlib.sha1()


class XXHashAlgorithmImpl(HashAlgorithm):
    name = "xxh128"

    @staticmethod
    def new() -> HashState:
        return xxhash.xxh128()


class XXHash64AlgorithmImpl(HashAlgorithm):
    name = "xxh64"

    @staticmethod
    def new() -> HashState:
        return xxhash.xxh64()


ALGORITHMS = {
    HashAlgorithmName.SHA1: Sha1AlgorithmImpl,
    HashAlgorithmName.XXH128: XXHashAlgorithmImpl,
    HashAlgorithmName.XXH64: XXHash64AlgorithmImpl,
}


def algorithm_for(name: HashAlgorithmName) -> HashAlgorithm:
    """Returns an algorithm instance for the given enum value."""
    try:
        return ALGORITHMS[name]()
    except KeyError:
        raise ValueError(f"Unsupported hash algorithm: {name!r}") from None


class HasherImpl(Hasher):
    """
    A hasher implementation that supports any algorithm via the HashAlgorithm interface.
    Two files with identical bytes always produce the same digest, whatever their
    path, timestamps or permissions.
    """

    def __init__(self, algorithm: HashAlgorithm = None, chunk_size: int = DEFAULT_CHUNK_SIZE):
        if chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        self.algorithm = algorithm or Sha1AlgorithmImpl()
        self.chunk_size = chunk_size

    def compute_digest(self, path: str) -> str:
        """
        Hash the complete content of the file at `path`.

        Raises:
            HashingError: If the file cannot be opened or read to completion.
        """
        state = self.algorithm.new()
        try:
            with open(path, 'rb') as f:
                for chunk in iter(lambda: f.read(self.chunk_size), b''):
                    state.update(chunk)
        except OSError as e:
            raise HashingError(f"checksum error: {path}: {e}", path=path) from e

        digest = state.hexdigest()
        logger.debug(f"{self.algorithm.name} {digest} {path}")
        return digest
