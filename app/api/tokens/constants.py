# Placeholder record returned until a real indexing backend exists.
PLACEHOLDER_TOKEN_ID = "token123"
PLACEHOLDER_NAME = "Example Token"
PLACEHOLDER_SYMBOL = "EXT"
PLACEHOLDER_DECIMALS = 18
PLACEHOLDER_TOTAL_SUPPLY = "1000000000000000000000000"
PLACEHOLDER_HOLDER_COUNT = 1000
