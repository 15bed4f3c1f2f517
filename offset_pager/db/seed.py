"""Sample people for the in-memory record source."""

from offset_pager.models.person import PersonRecord

GREETINGS = [
    "Bonjour",
    "Hola",
    "Salve",
    "Guten Tag",
    "Olá",
    "Anyoung haseyo",
    "Goedendag",
    "Yassas",
    "Shalom",
    "God dag",
]


def sample_people(n: int = 50) -> list[PersonRecord]:
    """
    ids 1..n in ascending order. Even ids are robots; greetings cycle through
    GREETINGS every ten records.
    """
    return [
        PersonRecord(
            id=i,
            name=f"Person {i}",
            greetings=GREETINGS[(i - 1) % len(GREETINGS)],
            robot=i % 2 == 0,
        )
        for i in range(1, n + 1)
    ]
