"""
DAOs Package — Data Access Layer (SQLAlchemy 2.0)
=================================================

Conventions
-----------
- Session lifecycle (open/commit/rollback) is handled by callers
- DAOs surface exceptions so upper layers decide error policy

Contents
--------
- RiskCategoryDao
    * countDocuments(session, filters) — exact-match count
    * createDocument(session, RiskCategory) — stages and flushes a new row
    * fetchById(session, id)
    * fetchDocuments(session, filters) — exact-match search over the known fields
    * updateById(session, id, changes, timestamp) — `$set` semantics, stamps `updated_at`
"""
