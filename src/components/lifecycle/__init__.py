"""Lifecycle component - publication creation, review workflow and enrichment."""

from src.components.lifecycle.component import PublicationLifecycle
from src.components.lifecycle.models import (
    ChangeStatusInput,
    CreatePublicationInput,
    GetPublicationInput,
    ListPublicationsInput,
    PublicationPageOutput,
    PublicationView,
)
from src.components.lifecycle.ports import AuthorGatewayPort, PublicationRepoPort

__all__ = [
    # Component
    "PublicationLifecycle",
    # Models
    "CreatePublicationInput",
    "GetPublicationInput",
    "ListPublicationsInput",
    "ChangeStatusInput",
    "PublicationView",
    "PublicationPageOutput",
    # Ports
    "PublicationRepoPort",
    "AuthorGatewayPort",
]
