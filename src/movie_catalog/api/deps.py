"""Shared FastAPI dependency aliases."""

from typing import Annotated

from fastapi import Depends

from movie_catalog.services.loader import CatalogLoader, get_catalog_loader
from movie_catalog.services.producers import ProducerResolver, get_producer_resolver
from movie_catalog.services.repository import RepositoryAccessor, get_repository
from movie_catalog.services.state import CatalogState, get_catalog_state

Catalog = Annotated[CatalogState, Depends(get_catalog_state)]
Loader = Annotated[CatalogLoader, Depends(get_catalog_loader)]
Repository = Annotated[RepositoryAccessor, Depends(get_repository)]
Resolver = Annotated[ProducerResolver, Depends(get_producer_resolver)]
