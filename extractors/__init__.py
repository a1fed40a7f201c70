"""Name extractors: map caller items to the names that get clustered."""

from extractors.names import name_of, key_getter, NameExtractionError

__all__ = ["name_of", "key_getter", "NameExtractionError"]
