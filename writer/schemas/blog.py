from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, Field

from writer.utils import collect_slots


class Recommendation(BaseModel):
    id: str


class BlogMetadata(BaseModel):
    id: str
    title: str
    author: str
    publishDate: str
    recommendations: List[Recommendation] = Field(default_factory=list)
    readtime: str
    tags: List[str] = Field(default_factory=list)
    excerpt: str
    cardImage: Optional[str] = None

    def to_json(self) -> str:
        return self.model_dump_json(exclude_none=True)


class ImageAsset(BaseModel):
    success: bool
    url: Optional[str] = None
    asset_id: Optional[str] = None
    error: Optional[str] = None


class CommitResult(BaseModel):
    success: bool
    error: Optional[str] = None


class PublishOutcome(BaseModel):
    success: bool
    error: Optional[str] = None
    message: Optional[Any] = None


class Submission(BaseModel):
    title: str = ""
    author: str = ""
    publishDate: str = ""
    readtime: str = ""
    excerpt: str = ""
    recommendations: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    markdown: Optional[bytes] = None
    image: Optional[bytes] = None
    image_filename: Optional[str] = None
    image_content_type: Optional[str] = None

    @classmethod
    def from_form(cls, fields: Mapping[str, Any], **files) -> "Submission":
        """Build a submission from multipart text fields plus already-read files."""

        def text(name: str) -> str:
            value = fields.get(name)
            return value.strip() if isinstance(value, str) else ""

        return cls(
            title=text("title"),
            author=text("author"),
            publishDate=text("publishDate"),
            readtime=text("readtime"),
            excerpt=text("excerpt"),
            recommendations=collect_slots(fields, "recommendations"),
            tags=collect_slots(fields, "tags"),
            **files,
        )
