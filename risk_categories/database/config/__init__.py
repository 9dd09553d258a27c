"""
The `config` package provides the two building blocks for establishing and managing the database connection.

Contents:
    - config: Configuration layer - strongly typed settings loaded from environment variables (with .env support), exposed through a singleton Settings object
    - connection_engine: Database layer - resolves the connection URL per environment (AWS Secrets Manager in production), creates the Engine at startup, and holds the shared MetaData and declarative base for ORM models
"""
