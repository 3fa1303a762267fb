"""
Marketing plan interactions app

Section-scoped interactions attached to the marketing plan document:
- Comments (append-only)
- Questions (answerable exactly once)
- Likes (one per user per section, toggled)
- Approvals (append-only decision history)

Every record stores a snapshot of the author's organizational context
taken at write time.  The `client` subpackage holds the HTTP client and
the mutation coordinator used by consuming views.
"""
__all__ = []
