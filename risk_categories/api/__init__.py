"""
API Package — FastAPI Router • Models • Identifier Utils • Readiness Status • AWS Secrets
========================================================================================

Contents
--------
- fast_api
    FastAPI router with endpoints for:
      • Readiness: GET /risk-categories/status
      • Risk Categories: create, get by id, search, partial update, soft delete
    Failures are translated into plain-text error bodies (empty body for 404).

- models
    Pydantic contracts and entity rules:
      • RiskCategoryRules — allow-list of storable fields with the field invariants
      • validate_risk_category(data) — raises EntityValidationError subclasses
      • RiskCategoryDetails — stored document as returned to clients

- utils
    Identifier helpers:
      • is_valid_id(value) — 24 hex characters
      • generate_id() — new identifier (time-ordered prefix + random suffix)

- status
    Readiness registry (`ServerStatus`): named fields plus the aggregate `Status`
    code, owned by the app (`app.state.server_status`).

- aws_secrets
    Secrets Manager helpers (module: aws_secrets/funcs.py):
      • get_client(region)
      • get_secret(region, secret_name=None) — decoded JSON secret
    Used to build the production database URL.

Operational Notes
-----------------
- Error bodies are text, never JSON objects.
- Never log secrets or connection URLs.
"""
