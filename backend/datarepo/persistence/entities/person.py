from __future__ import annotations

from datetime import date
from typing import ClassVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, computed_field
from pydantic.alias_generators import to_camel

from ..keys import make_key


class Person(BaseModel):
    """A person owned by a client.

    Key model:
      - pk = PERSON#<entity_id>, sk = CLIENT#<client_id>
      - GSI1: gsi1pk = CLIENT#<client_id>, gsi1sk = DOB#<YYYY-MM-DD>
        (everyone a client owns, ordered by date of birth)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    HASH_PREFIX: ClassVar[str] = "PERSON"
    RANGE_PREFIX: ClassVar[str] = "CLIENT"
    SECONDARY_HASH_PREFIX: ClassVar[str] = "CLIENT"
    SECONDARY_RANGE_PREFIX: ClassVar[str] = "DOB"

    entity_id: UUID
    client_id: UUID
    name: str
    date_of_birth: date
    image_url: str

    @computed_field(alias="pk")
    @property
    def pk(self) -> str:
        return make_key(self.HASH_PREFIX, self.entity_id)

    @computed_field(alias="sk")
    @property
    def sk(self) -> str:
        return make_key(self.RANGE_PREFIX, self.client_id)

    @computed_field(alias="gsi1pk")
    @property
    def gsi1pk(self) -> str:
        return make_key(self.SECONDARY_HASH_PREFIX, self.client_id)

    @computed_field(alias="gsi1sk")
    @property
    def gsi1sk(self) -> str:
        return make_key(self.SECONDARY_RANGE_PREFIX, self.date_of_birth)

    @classmethod
    def default(cls) -> Person:
        return cls(
            entity_id=UUID(int=0),
            client_id=UUID(int=0),
            name="",
            date_of_birth=date.min,
            image_url="",
        )
