import logging
from typing import Annotated

from fastapi import APIRouter, FastAPI, Path, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse as JSONResponse

from app.api.common.annotations import TOKEN_ID_DESCRIPTION
from app.api.common.models import Tags
from app.api.tokens.manager import TokenManager
from app.api.tokens.metrics import record_token_request
from app.api.tokens.models import (
    TokenError,
    TokenErrorKind,
    TokenIndexRequest,
    TokenOperation,
    TokenResponse,
    TokenSearchQuery,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/tokens", tags=[Tags.TOKENS])


def _operation_for(request: Request) -> TokenOperation:
    endpoint = request.scope.get("endpoint")
    return {
        "index_token": TokenOperation.INDEX,
        "search_tokens": TokenOperation.SEARCH,
        "get_token": TokenOperation.GET,
    }.get(getattr(endpoint, "__name__", ""), TokenOperation.UNKNOWN)


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Invalid request"


def setup_tokens_error_handler(app: FastAPI):
    async def handler(request: Request, exc: TokenError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.as_dict(),
        )

    async def validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        error = TokenError(
            message=_format_validation_errors(exc),
            kind=TokenErrorKind.INVALID_REQUEST,
            status_code=400,
        )
        logger.warning(f"Rejected {request.method} {request.url.path}: {error.message}")
        record_token_request(_operation_for(request), "invalid")
        return await handler(request, error)

    app.add_exception_handler(TokenError, handler)
    app.add_exception_handler(RequestValidationError, validation_handler)


@router.post("/index", response_model=TokenResponse)
async def index_token(request: TokenIndexRequest) -> TokenResponse:
    """
    Index a new token.
    """
    response = await TokenManager.index(request)
    record_token_request(TokenOperation.INDEX, "success")
    return response


@router.get("/search", response_model=list[TokenResponse])
async def search_tokens(
    query: Annotated[TokenSearchQuery, Query()],
) -> list[TokenResponse]:
    """
    Search tokens by criteria.
    """
    results = await TokenManager.search(query)
    record_token_request(TokenOperation.SEARCH, "success")
    return results


@router.get("/{token_id}", response_model=TokenResponse)
async def get_token(
    token_id: str = Path(..., description=TOKEN_ID_DESCRIPTION),
) -> TokenResponse:
    """
    Get token details by ID.
    """
    response = await TokenManager.get(token_id)
    record_token_request(TokenOperation.GET, "success")
    return response
