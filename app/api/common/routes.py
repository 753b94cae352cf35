from fastapi import APIRouter

from app.api.common.models import HealthStatus, PingResponse, Tags

router = APIRouter(prefix="/api", tags=[Tags.HEALTH])


@router.get("/ping", response_model=PingResponse)
async def ping():
    # Nothing to probe: the service has no backing store.
    return PingResponse(status=HealthStatus.OK)
