"""User Search Schemas — wire shapes for results, errors, and client requests.

Invariants:
    - UserView serializes with the exact wire names Id, Name, Age, About, Gender
    - UserView.Name is the derived full name, never first/last separately
    - ErrorEnvelope.code is an optional free string: envelopes from code-less
      servers, or with codes this client does not know, still decode
    - SearchRequest carries no range constraints; the client raises typed
      InvalidLimitError/InvalidOffsetError instead of Pydantic errors
"""

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from usersearch.core.domain_types import Record


class UserView(BaseModel):
    """JSON projection of a Record."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int = Field(alias="Id")
    name: str = Field(alias="Name")
    age: int = Field(alias="Age")
    about: str = Field(alias="About")
    gender: str = Field(alias="Gender")

    @classmethod
    def from_record(cls, record: Record) -> "UserView":
        return cls(
            id=record.id,
            name=record.full_name,
            age=record.age,
            about=record.about,
            gender=record.gender,
        )


UserList = TypeAdapter(list[UserView])


class ErrorEnvelope(BaseModel):
    """Body of every non-2xx response."""
    error: str
    code: str | None = None


class SearchRequest(BaseModel):
    """Typed parameters for SearchClient.find_users."""
    model_config = ConfigDict(frozen=True)

    limit: int
    offset: int = 0
    query: str = ""
    order_field: str = ""
    order_by: int = 0


class SearchResponse(BaseModel):
    """One page of users plus whether another page exists."""
    users: list[UserView]
    next_page: bool
