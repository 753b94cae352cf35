import pytest
from pydantic import ValidationError

from app.api.common.models import UINT64_MAX
from app.api.tokens.models import (
    TokenError,
    TokenErrorKind,
    TokenIndexRequest,
    TokenResponse,
    TokenSearchQuery,
)


def _response(**overrides) -> TokenResponse:
    fields = {
        "token_id": "token123",
        "name": "Example Token",
        "symbol": "EXT",
        "decimals": 18,
        "total_supply": "1000000000000000000000000",
        "holder_count": 1000,
    }
    fields.update(overrides)
    return TokenResponse(**fields)


@pytest.mark.parametrize("chain_id", [0, 1, 8453, UINT64_MAX])
def test_index_request_accepts_uint64_chain_id(chain_id):
    request = TokenIndexRequest(token_address="0x1", chain_id=chain_id)
    assert request.chain_id == chain_id


@pytest.mark.parametrize("chain_id", [-1, UINT64_MAX + 1, "1", True])
def test_index_request_rejects_invalid_chain_id(chain_id):
    with pytest.raises(ValidationError):
        TokenIndexRequest(token_address="0x1", chain_id=chain_id)


@pytest.mark.parametrize("decimals", [0, 18, 255])
def test_response_accepts_uint8_decimals(decimals):
    assert _response(decimals=decimals).decimals == decimals


@pytest.mark.parametrize("decimals", [-1, 256])
def test_response_rejects_out_of_range_decimals(decimals):
    with pytest.raises(ValidationError):
        _response(decimals=decimals)


@pytest.mark.parametrize("total_supply", ["", "1.5", "-1", "1e24"])
def test_response_rejects_non_integer_total_supply(total_supply):
    with pytest.raises(ValidationError):
        _response(total_supply=total_supply)


def test_response_dumps_total_supply_as_string():
    dumped = _response().model_dump(mode="json")
    assert dumped["total_supply"] == "1000000000000000000000000"


def test_search_query_ignores_unknown_fields():
    query = TokenSearchQuery.model_validate({"q": "ext", "limit": "10"})
    assert query.q == "ext"
    assert not hasattr(query, "limit")


def test_search_query_defaults_to_no_text():
    assert TokenSearchQuery().q is None


def test_token_error_as_dict():
    error = TokenError("bad input", kind=TokenErrorKind.INVALID_REQUEST)

    assert error.status_code == 400
    assert str(error) == "bad input"
    assert error.as_dict() == {"message": "bad input", "kind": "INVALID_REQUEST"}


def test_token_error_defaults_to_unknown_kind():
    assert TokenError("boom").kind == TokenErrorKind.UNKNOWN
