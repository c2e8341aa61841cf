"""
config.py - MiniToken configuration constants.
"""

# Largest representable amount (256-bit unsigned)
MAX_AMOUNT = 2 ** 256 - 1

# Addresses are unpadded URL-safe base64 of a 32-byte digest
ADDRESS_DIGEST_SIZE = 32
ADDRESS_LENGTH = 43

# Defaults used by `minitoken init`
DEFAULT_TICKER = "TST"
DEFAULT_NAME = "Test Token"
DEFAULT_DECIMALS = 10
DEFAULT_TOTAL_SUPPLY = 10000000000000000000

# decimals is stored as an unsigned byte
MAX_DECIMALS = 255

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATEFMT = "%H:%M:%S"
