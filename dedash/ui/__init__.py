"""
View layer.

Responsibilities:
- Turn directory records into list and detail view models.
- Hold the transient per-page state (sort key, profile panel).
- Build navigation targets for restaurant cards.
"""
