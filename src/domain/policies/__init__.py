"""Domain policies package."""

from .transaction_rules import category_allows_type, person_may_record

__all__ = ["category_allows_type", "person_may_record"]
