# This file provides dependency factories for FastAPI routes.
# It exists so services and the pricing table are created once and shared through dependency injection.
# The setup keeps routers thin and makes endpoint tests easy to override.

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache

from src.api.api_config import ApiConfig, get_api_config
from src.api.services.agent_service import AgentService
from src.api.services.contact_service import ContactService
from src.api.services.quote_service import QuoteService
from src.directory.agent_data import AGENTS
from src.quoting.pricing_tiers import PricingTier, load_pricing_table


@lru_cache(maxsize=1)
def get_pricing_table() -> Mapping[str, PricingTier]:
    config = get_api_config()
    return load_pricing_table(config_path=config.pricing_config_path)


@lru_cache(maxsize=1)
def get_quote_service() -> QuoteService:
    return QuoteService(pricing=get_pricing_table())


@lru_cache(maxsize=1)
def get_agent_service() -> AgentService:
    return AgentService(agents=AGENTS)


@lru_cache(maxsize=1)
def get_contact_service() -> ContactService:
    return ContactService()


def get_config() -> ApiConfig:
    return get_api_config()
