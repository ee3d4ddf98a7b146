"""Listing post models.

Posts are stored and served with the front end's camelCase keys
(``publishedAt``, ``isRemote``, ...). Python code uses snake_case attributes.
"""

from enum import StrEnum
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from careerhub.utils import today

# Keys only the store may set
RESERVED_KEYS = frozenset({"id", "publishedAt", "published_at"})

# A post as stored in the posts file, keyed the way the front end reads it
PostRecord = dict[str, Any]


class PostCategory(StrEnum):
    JOB = "job"
    INTERNSHIP = "internship"
    STARTUP = "startup"


class ExperienceLevel(StrEnum):
    FRESHER = "fresher"
    EXPERIENCED = "experienced"
    ALL = "all"


class PostModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",  # Records are opaque to the store, unknown keys survive round trips
    )


def _drop_reserved_keys(data: Any) -> Any:
    if isinstance(data, dict):
        return {key: value for key, value in data.items() if key not in RESERVED_KEYS}
    return data


class PostFields(PostModel):
    """Caller-supplied listing fields."""

    title: str = Field(..., min_length=1, description="Listing title")
    excerpt: str = Field("", description="Short summary shown on the listing card")
    content: str = Field("", description="Full listing description")
    category: PostCategory = Field(PostCategory.JOB, description="Listing category")
    company: str = Field("", description="Hiring company")
    location: str = Field("", description="Job location")
    salary: str | None = Field(None, description="Salary or stipend, free text")
    experience: ExperienceLevel = Field(ExperienceLevel.FRESHER, description="Target experience level")
    image: str | None = Field(None, description="Image URL")
    tags: list[str] = Field(default_factory=list, description="Free-form tags")
    is_remote: bool = Field(False, description="Whether the position is remote")
    application_deadline: str | None = Field(None, description="Application deadline, free text or YYYY-MM-DD")


class PostCreate(PostFields):
    """Fields for a new post. Identifier and publication date are assigned by the store."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "title": "Junior Backend Developer",
                    "excerpt": "Python and FastAPI role for recent graduates",
                    "content": "We are looking for...",
                    "category": "job",
                    "company": "Acme",
                    "location": "Pune",
                    "salary": "6-8 LPA",
                    "experience": "fresher",
                    "tags": ["python", "backend"],
                    "isRemote": True,
                    "applicationDeadline": "2026-12-01",
                }
            ]
        }
    )

    @model_validator(mode="before")
    @classmethod
    def strip_reserved_keys(cls, data: Any) -> Any:
        return _drop_reserved_keys(data)


class PostUpdate(PostModel):
    """Partial update: only keys present in the request overwrite the stored post.

    An omitted key keeps its stored value. An explicit null clears an optional field.
    """

    title: str | None = Field(None, min_length=1)
    excerpt: str | None = None
    content: str | None = None
    category: PostCategory | None = None
    company: str | None = None
    location: str | None = None
    salary: str | None = None
    experience: ExperienceLevel | None = None
    image: str | None = None
    tags: list[str] | None = None
    is_remote: bool | None = None
    application_deadline: str | None = None

    @model_validator(mode="before")
    @classmethod
    def strip_reserved_keys(cls, data: Any) -> Any:
        return _drop_reserved_keys(data)

    def changes(self) -> dict[str, Any]:
        """Explicitly provided fields, keyed the way they are stored."""
        changes = self.model_dump(mode="json", by_alias=True, exclude_unset=True)
        changes.update(self.model_extra or {})
        return changes


class Post(PostFields):
    """A stored listing, as documented in the API schema.

    Stored posts are served as plain records: legacy entries that would not pass
    ``PostFields`` validation are still listed and returned unchanged.
    """

    id: str = Field(..., description="Post ID, assigned on creation")
    published_at: str = Field(..., description="Publication date (YYYY-MM-DD), set on creation")


def new_post_record(data: PostCreate) -> PostRecord:
    """Build a stored record from the fields the caller sent, plus a fresh ID and today's date."""
    fields = data.model_dump(mode="json", by_alias=True, exclude_unset=True)
    fields.update(data.model_extra or {})
    return {"id": str(uuid4()), **fields, "publishedAt": today()}
