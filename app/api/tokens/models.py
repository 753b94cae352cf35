from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from app.api.common.annotations import (
    CHAIN_ID_DESCRIPTION,
    SEARCH_QUERY_DESCRIPTION,
    TOKEN_ADDRESS_DESCRIPTION,
    TOKEN_ID_DESCRIPTION,
    TOTAL_SUPPLY_DESCRIPTION,
)
from app.api.common.models import UINT8_MAX, UINT64_MAX


class TokenErrorKind(str, Enum):
    INVALID_REQUEST = "INVALID_REQUEST"
    UNKNOWN = "UNKNOWN"


class TokenError(Exception):
    def __init__(
        self,
        message: str,
        kind: TokenErrorKind = TokenErrorKind.UNKNOWN,
        status_code: int = 400,
    ):
        self.message = message
        self.kind = kind
        self.status_code = status_code
        super().__init__(self.message)

    def as_dict(self) -> dict:
        return {"message": self.message, "kind": self.kind.value}


class TokenOperation(str, Enum):
    INDEX = "index"
    SEARCH = "search"
    GET = "get"
    UNKNOWN = "unknown"


class TokenIndexRequest(BaseModel):
    token_address: str = Field(..., strict=True, description=TOKEN_ADDRESS_DESCRIPTION)
    chain_id: int = Field(
        ..., strict=True, ge=0, le=UINT64_MAX, description=CHAIN_ID_DESCRIPTION
    )


class TokenSearchQuery(BaseModel):
    q: str | None = Field(None, description=SEARCH_QUERY_DESCRIPTION)

    # Any query string must bind, so unknown parameters are dropped.
    model_config = ConfigDict(extra="ignore")


class TokenResponse(BaseModel):
    token_id: str = Field(..., description=TOKEN_ID_DESCRIPTION)
    name: str = Field(..., description="Token name")
    symbol: str = Field(..., description="Token symbol")
    decimals: int = Field(..., ge=0, le=UINT8_MAX, description="Token decimals")
    total_supply: str = Field(
        ..., pattern=r"^[0-9]+$", description=TOTAL_SUPPLY_DESCRIPTION
    )
    holder_count: int = Field(
        ..., ge=0, le=UINT64_MAX, description="Number of addresses holding the token"
    )
