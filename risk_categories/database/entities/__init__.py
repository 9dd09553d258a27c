"""
Entities Package — SQLAlchemy 2.0 ORM Models
============================================

Tech Stack & Conventions
------------------------
- SQLAlchemy 2.0 style `Mapped[...]` + `mapped_column(...)`
- 24-hex-character string identifiers assigned by the application
- Timezone-aware timestamps (UTC)
- JSON column for list-valued fields

Contents
--------
- RiskCategory
    One language-scoped risk classification.
    * Fields: `id`, `deleted`, `keywords` (JSON list), `language_code`, `name`,
      `risk_level`, `updated_by_user_id`, `created_at`, `updated_at`
    * Rows are soft-deleted (`deleted = True`), never removed
"""
