"""
Routes untuk policy builder dan explainer
"""
from fastapi import APIRouter

from agent_permissions.api.models import (
    PolicyBuildRequest,
    PolicyExplainRequest,
    PolicyExplainResponse,
)
from agent_permissions.policy import (
    PolicyBuildConfig,
    PolicyParseError,
    build_policy,
    parse_policy,
)

router = APIRouter(prefix="/api/v1/policy", tags=["policy"])


@router.post("/build")
async def build(request: PolicyBuildRequest):
    """Build a canonical document from the builder toggles"""
    config = PolicyBuildConfig(
        site_name=request.site_name or "",
        allow_read_content=request.allow_read_content,
        allow_read_metadata=request.allow_read_metadata,
        allow_navigation=request.allow_navigation,
        allow_forms=request.allow_forms,
        require_human_for_forms=request.require_human_for_forms,
        allow_downloads=request.allow_downloads,
        rate_limit=request.rate_limit,
        block_login=request.block_login
    )
    return build_policy(config).to_dict()


@router.post("/explain", response_model=PolicyExplainResponse)
async def explain(request: PolicyExplainRequest):
    """Best-effort explanation of an arbitrary policy document"""
    parsed = parse_policy(request.policy)
    if isinstance(parsed, PolicyParseError):
        return PolicyExplainResponse(error=parsed.error)
    return PolicyExplainResponse(**parsed.to_dict())
