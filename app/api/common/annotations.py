TOKEN_ID_DESCRIPTION = "Opaque identifier of an indexed token"
TOKEN_ADDRESS_DESCRIPTION = "Contract address of the token in the chain's native format (e.g. 0x-prefixed hex for EVM chains)"
CHAIN_ID_DESCRIPTION = "Numeric identifier of the blockchain network (e.g. 1 for Ethereum, 8453 for Base)"
SEARCH_QUERY_DESCRIPTION = "Free-text search query for token name, symbol, or contract address"
TOTAL_SUPPLY_DESCRIPTION = (
    "Total supply in the token's smallest unit, encoded as a decimal string"
)
