"""Domain services - Stateless operations over application documents."""

from .application_merger import deep_merge, merge_application_document, prune_empty

__all__ = ["deep_merge", "merge_application_document", "prune_empty"]
