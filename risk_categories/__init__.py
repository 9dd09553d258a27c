"""
Risk Categories Service
=======================

FastAPI resource service for language-scoped risk categories (named keyword
lists with a severity level), backed by a SQL document table, with a readiness
status endpoint for orchestration health checks.

Contents
--------
- main
    App factory, lifespan (database connection + readiness reporting), uvicorn entry point.
- api
    HTTP router, pydantic contracts and entity rules, identifier helpers,
    readiness registry, AWS Secrets Manager access.
- database
    Settings, engine bootstrap, ORM entity, DAO, transactional service layer.
- errors
    Exception taxonomy translated into HTTP status codes at the router.
"""

NAME = "risk-categories-service"
"""Service name reported by the status endpoint."""

DESCRIPTION = "Risk Categories Service"
"""Human-readable description reported by the status endpoint."""

__version__ = "1.0.0"
