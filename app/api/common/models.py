from enum import Enum

from pydantic import BaseModel

# Upper bound of an unsigned 64-bit integer
UINT64_MAX = 2**64 - 1

# Upper bound of an unsigned 8-bit integer
UINT8_MAX = 2**8 - 1


class HealthStatus(str, Enum):
    OK = "OK"


class Tags(str, Enum):
    """API documentation tags for grouping endpoints in Swagger UI."""

    HEALTH = "Health"
    TOKENS = "Tokens"


class PingResponse(BaseModel):
    status: HealthStatus
