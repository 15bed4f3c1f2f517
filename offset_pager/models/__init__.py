from offset_pager.models.person import Person, PersonOut, PersonRecord

__all__ = [
    "Person",
    "PersonOut",
    "PersonRecord",
]
