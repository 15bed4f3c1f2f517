"""People listed by the demo endpoint."""

from beanie import Document
from pydantic import BaseModel


class PersonRecord(BaseModel):
    """A person held outside Mongo (the in-memory record source)."""

    id: int
    name: str
    greetings: str
    robot: bool = False


class Person(Document):
    id: int
    name: str
    greetings: str
    robot: bool = False

    class Settings:
        name = "people"


class PersonOut(BaseModel):
    identification: int
    honest_name: str
    salute: str
    am_robot: bool

    @classmethod
    def from_record(cls, person: Person | PersonRecord) -> "PersonOut":
        return cls(
            identification=person.id,
            honest_name=person.name,
            salute=person.greetings,
            am_robot=person.robot,
        )
