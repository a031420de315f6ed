"""Domain layer: the contact value type. No dependencies on outer layers."""

from contactbook.domain.entities import ContactRecord, NameMatch, normalize_name

__all__ = ["ContactRecord", "NameMatch", "normalize_name"]
