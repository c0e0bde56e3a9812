"""Módulo de serviços."""

from .auth_service import AuthService
from .list_service import ListService
from .subscriber_service import SubscriberService
from .account_service import AccountService
from .campaign_service import CampaignService
from .template_service import TemplateService

__all__ = [
    "AuthService", "ListService", "SubscriberService",
    "AccountService", "CampaignService", "TemplateService",
]
