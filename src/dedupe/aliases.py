from dedupe.core.models import HashAlgorithmName

ALGORITHM_ALIASES = {
    "sha1": HashAlgorithmName.SHA1,
    "xxh128": HashAlgorithmName.XXH128,
    "xxh64": HashAlgorithmName.XXH64,
}

ALGORITHM_CHOICES = list(ALGORITHM_ALIASES.keys())

ALGORITHM_HELP_TEXT = (
    "Content digest algorithm:\n"
    "  sha1   : SHA-1 (default, same digests as sha1sum)\n"
    "  xxh128 : xxHash 128-bit (much faster, non-cryptographic)\n"
    "  xxh64  : xxHash 64-bit\n"
)

EPILOG_TEXT = """
Examples:
  List duplicate text and Word files in Documents
  %(prog)s -d ~/Documents -x txt,doc

  Keep the .doc version whenever a file exists in several formats
  %(prog)s -d ~/Documents -x txt,doc -p doc

  Same as above and delete the duplicates (10 second countdown first)
  %(prog)s -d ~/Documents -x txt,doc -p doc --clean

  Move duplicates to trash instead, no countdown, 4 hashing threads
  %(prog)s -d ~/Photos -x jpg,png --clean --trash --delay 0 -w 4
"""
