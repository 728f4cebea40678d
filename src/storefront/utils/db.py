"""Relational schema management for the storefront's database providers.

The in-memory provider needs no schema; SQLite and PostgreSQL providers get
tables for every aggregate and entity they persist.
"""

from protean.domain import Domain
from sqlalchemy import create_engine

_RELATIONAL_PROVIDERS = ("sqlite", "postgresql")


def _relational_providers(domain: Domain):
    for provider in domain.providers.values():
        if provider.conn_info["provider"] in _RELATIONAL_PROVIDERS:
            yield provider


def _register_models(domain: Domain, provider) -> None:
    """Build each element's DAO so its table lands in the provider's metadata."""
    records = [*domain.registry.aggregates.values(), *domain.registry.entities.values()]
    for record in records:
        if record.cls.meta_.provider == provider.name:
            domain.repository_for(record.cls)._dao  # noqa: B018


def setup_db(domain: Domain) -> None:
    with domain.domain_context():
        for provider in _relational_providers(domain):
            _register_models(domain, provider)
            provider._metadata.create_all(create_engine(provider.conn_info["database_uri"]))


def drop_db(domain: Domain) -> None:
    with domain.domain_context():
        for provider in _relational_providers(domain):
            provider._metadata.drop_all(create_engine(provider.conn_info["database_uri"]))
