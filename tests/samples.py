"""Known retail ID vectors shared across test modules."""

# Canonical vector: batch 1a4060300020081000006609 at index 1.
SAMPLE_HEX = "1a4060300020081000006609"
SAMPLE_INDEX = 1
SAMPLE_BASE36_URL = "HTTPS://1A4.COM/5LN8CBN1UB33DON9CHKX"
SAMPLE_BASE36_CODE = "5LN8CBN1UB33DON9CHKX"
SAMPLE_BASE64_URL = "https://1a4.com/GkBgMAAgCBAAAGYJAQ"
SAMPLE_BASE64_CODE = "GkBgMAAgCBAAAGYJAQ"

# Unknown prefix, timestamp 0x5f5e1000 (2020-09-13): passes mongo validation.
MONGO_HEX = "5f5e10000000000000000001"
# Unknown prefix, timestamp 1 (1970): only passes "any" validation.
ANCIENT_HEX = "000000010000000000000001"
