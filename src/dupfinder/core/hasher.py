"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements whole-file content hashing with pluggable hash algorithms.

The HasherImpl class streams each file through a fixed-size buffer, so memory use
does not depend on file size. A file that cannot be read produces no digest at all:
a partial digest is never returned.

Equal digests are trusted as equal content. There is no byte-by-byte confirmation
pass, the collision probability of the chosen algorithm is the accepted error bound.
"""

import hashlib
import logging
from typing import Dict, Optional

import xxhash

from dupfinder.core.models import DigestResult, HashAlgorithmName
from dupfinder.core.interfaces import Hasher, HashAlgorithm, HashAccumulator

logger = logging.getLogger(__name__)

BUFFER_SIZE = 4096


# Use the same way to implement and use any other hashing algorithm
class Blake2bAlgorithmImpl(HashAlgorithm):
    name = HashAlgorithmName.BLAKE2B.value
    digest_size = 64

    def new(self) -> HashAccumulator:
        return hashlib.blake2b()


class Sha256AlgorithmImpl(HashAlgorithm):
    name = HashAlgorithmName.SHA256.value
    digest_size = 32

    def new(self) -> HashAccumulator:
        return hashlib.sha256()


class Sha1AlgorithmImpl(HashAlgorithm):
    name = HashAlgorithmName.SHA1.value
    digest_size = 20

    def new(self) -> HashAccumulator:
        return hashlib.sha1()


class XXHashAlgorithmImpl(HashAlgorithm):
    """Non-cryptographic, much faster. Opt-in only."""
    name = HashAlgorithmName.XXH128.value
    digest_size = 16

    def new(self) -> HashAccumulator:
        return xxhash.xxh3_128()


_ALGORITHMS: Dict[HashAlgorithmName, type] = {
    HashAlgorithmName.BLAKE2B: Blake2bAlgorithmImpl,
    HashAlgorithmName.SHA256: Sha256AlgorithmImpl,
    HashAlgorithmName.SHA1: Sha1AlgorithmImpl,
    HashAlgorithmName.XXH128: XXHashAlgorithmImpl,
}


def get_algorithm(name: HashAlgorithmName) -> HashAlgorithm:
    """Returns an algorithm instance for the given name."""
    try:
        return _ALGORITHMS[HashAlgorithmName(name)]()
    except (KeyError, ValueError):
        raise ValueError(f"Unsupported hash algorithm: {name!r}")


class HasherImpl(Hasher):
    """
    A hasher implementation that supports any algorithm via the HashAlgorithm interface.
    Holds no mutable state, so one instance can serve many worker threads.
    """

    def __init__(self, algorithm: Optional[HashAlgorithm] = None, buffer_size: int = BUFFER_SIZE):
        if buffer_size <= 0:
            raise ValueError("Buffer size must be positive")
        self.algorithm = algorithm or Blake2bAlgorithmImpl()
        self.buffer_size = buffer_size

    def compute_full_hash(self, path: str) -> bytes:
        """
        Digest of the entire file, read in `buffer_size` chunks until end of stream.
        Raises OSError if the file cannot be opened or read.
        """
        accumulator = self.algorithm.new()
        buffer = bytearray(self.buffer_size)
        view = memoryview(buffer)
        with open(path, 'rb', buffering=0) as f:
            while True:
                num = f.readinto(buffer)
                if not num:
                    break
                accumulator.update(view[:num])
        return accumulator.digest()

    def hash_file(self, size: int, path: str) -> Optional[DigestResult]:
        """
        Hashes one candidate file. Returns None when the file cannot be read,
        which drops it from further grouping.
        """
        try:
            digest = self.compute_full_hash(path)
        except OSError as e:
            logger.warning(f"Skipping {path}: {e}")
            return None
        return DigestResult(size=size, path=path, digest=digest)
