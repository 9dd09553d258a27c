"""
The `database` package is responsible for all interactions with the service's database.
It provides configuration, the entity definition, data access, the service layer,
and transaction helpers.

Contents:
    - config:
        Settings and the connection engine (URL resolution per environment,
        startup connection reported into the readiness registry).

    - entities:
        SQLAlchemy entity model for the `risk_category` table.

    - daos:
        Data Access Object with document-store style operations
        (count, insert, find by id, find by filter, update by id).

    - core:
        Service operations that connect the router with the database and
        enforce the Risk Category rules.

    - helpers:
        Transaction and session management (`@transactional`).
"""
