"""
Package initializer for the marketing plan presentation backend.

The project exposes the section-scoped interaction API (comments,
questions, likes and approvals) plus the JWT auth and profile endpoints
it depends on.
"""
