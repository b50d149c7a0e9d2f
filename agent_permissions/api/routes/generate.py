"""
Routes untuk policy generation
"""
from fastapi import APIRouter, Depends

from agent_permissions.api.config import Settings
from agent_permissions.api.dependencies import get_crawl_config, get_generator, get_settings
from agent_permissions.api.generator import PolicyGenerator
from agent_permissions.api.models import GenerateRequest, GenerateResponse
from agent_permissions.api.services import GenerateService
from agent_permissions.crawl import CrawlConfig

router = APIRouter(prefix="/api/v1/generate", tags=["generate"])


@router.post("", response_model=GenerateResponse)
async def generate_policy(
    request: GenerateRequest,
    generator: PolicyGenerator = Depends(get_generator),
    app_settings: Settings = Depends(get_settings),
    crawl_config: CrawlConfig = Depends(get_crawl_config)
):
    """Crawl the landing page and ask the model for a draft policy"""
    return await GenerateService.generate(
        request=request,
        generator=generator,
        app_settings=app_settings,
        crawl_config=crawl_config
    )
