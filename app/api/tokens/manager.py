import logging

from app.api.tokens.constants import (
    PLACEHOLDER_DECIMALS,
    PLACEHOLDER_HOLDER_COUNT,
    PLACEHOLDER_NAME,
    PLACEHOLDER_SYMBOL,
    PLACEHOLDER_TOKEN_ID,
    PLACEHOLDER_TOTAL_SUPPLY,
)
from app.api.tokens.models import TokenIndexRequest, TokenResponse, TokenSearchQuery

logger = logging.getLogger(__name__)


class TokenManager:
    """
    Entry point for token indexing, search and lookup.

    No indexing backend is wired in yet: every operation answers with the
    placeholder record and leaves its inputs uninspected.
    """

    @classmethod
    async def index(cls, request: TokenIndexRequest) -> TokenResponse:
        logger.info(
            f"Index requested for token {request.token_address} on chain {request.chain_id}"
        )
        return cls._placeholder()

    @classmethod
    async def search(cls, query: TokenSearchQuery) -> list[TokenResponse]:
        logger.debug(f"Token search requested: q={query.q!r}")
        return [cls._placeholder()]

    @classmethod
    async def get(cls, token_id: str) -> TokenResponse:
        logger.debug(f"Token lookup requested: {token_id}")
        return cls._placeholder(token_id=token_id)

    @staticmethod
    def _placeholder(token_id: str = PLACEHOLDER_TOKEN_ID) -> TokenResponse:
        return TokenResponse(
            token_id=token_id,
            name=PLACEHOLDER_NAME,
            symbol=PLACEHOLDER_SYMBOL,
            decimals=PLACEHOLDER_DECIMALS,
            total_supply=PLACEHOLDER_TOTAL_SUPPLY,
            holder_count=PLACEHOLDER_HOLDER_COUNT,
        )
