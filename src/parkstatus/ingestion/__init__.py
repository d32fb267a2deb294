"""Ingestion layer.

This package contains adapters that turn raw collaborator payloads
(places search results, vote store documents) into validated models.
Malformed items are dropped here and never reach the status core.
"""

__all__: list[str] = []
