from pydantic import BaseModel, ConfigDict, Field

# Required fields are optional at the schema level so that a missing field is
# reported by the note service with its per-operation 400 message.
# Unknown fields are rejected outright.


class NoteCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, max_length=200)
    content: str | None = Field(default=None, max_length=100_000)
    type: str | None = Field(default=None, max_length=50)
    password: str | None = Field(default=None, max_length=128)


class NoteGet(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str | None = None
    password: str | None = Field(default=None, max_length=128)


class NoteUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    id: str | None = None
    title: str | None = Field(default=None, max_length=200)
    content: str | None = Field(default=None, max_length=100_000)
    type: str | None = Field(default=None, max_length=50)
    current_password: str | None = Field(default=None, alias="currentPassword", max_length=128)
    new_password: str | None = Field(default=None, alias="newPassword", max_length=128)


class NoteDelete(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str | None = None
    password: str | None = Field(default=None, max_length=128)


class NoteOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    content: str
    type: str
    views: int
    created_at: str = Field(alias="createdAt")


class NoteIdOut(BaseModel):
    id: str
    message: str


class MessageOut(BaseModel):
    message: str
