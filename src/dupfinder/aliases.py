from dupfinder.core.models import HashAlgorithmName

ALGORITHM_ALIASES = {
    "blake2b": HashAlgorithmName.BLAKE2B,
    "sha256": HashAlgorithmName.SHA256,
    "sha1": HashAlgorithmName.SHA1,
    "xxh128": HashAlgorithmName.XXH128,
}

ALGORITHM_CHOICES = list(ALGORITHM_ALIASES.keys())

ALGORITHM_HELP_TEXT = (
    "Content digest used to compare files:\n"
    "  blake2b    : BLAKE2b-512 (default)\n"
    "  sha256     : SHA-256\n"
    "  sha1       : SHA-1\n"
    "  xxh128     : xxHash3-128, much faster but not cryptographic\n"
    "Files with equal digests are reported as duplicates without a byte-by-byte check."
)

EPILOG_TEXT = """
Examples:
  Basic usage - find duplicates in Downloads folder
  %(prog)s ~/Downloads

  Compare two trees and print the total reclaimable space
  %(prog)s ~/Pictures /mnt/backup/Pictures --summarize

  Only the total, skipping hidden files and going at most 2 levels deep
  %(prog)s ~/projects -d 2 --exclude-hidden -m -q

  Ignore small files and hash with 8 worker threads
  %(prog)s ~/Videos --min-size 10MiB -j 8
"""
