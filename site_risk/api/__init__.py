"""Assessment API.

Follows the CDP APIRouter pattern: each feature has its own router module,
assembled here into a single FastAPI app.

Endpoints:
    GET  /health               - Health check for CDP ECS monitoring
    POST /assess               - Assess a site across all (or selected) disciplines
    POST /assess/{discipline}  - Assess a single discipline
"""

from fastapi import FastAPI

from site_risk.api.assess_router import router as assess_router
from site_risk.api.health_router import router as health_router
from site_risk.common.tracing import TraceIdMiddleware

app = FastAPI(title="Site Planning Risk API")

app.add_middleware(TraceIdMiddleware)
app.include_router(health_router)
app.include_router(assess_router)
