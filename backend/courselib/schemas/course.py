"""Pydantic schemas for courses."""

from uuid import UUID

from pydantic import BaseModel

from courselib.schemas.base import API_MODEL_CONFIG


class CourseDto(BaseModel):
    """Course in API responses."""

    model_config = API_MODEL_CONFIG

    id: UUID
    title: str
    description: str | None
    author_id: UUID


class CourseForCreationDto(BaseModel):
    model_config = API_MODEL_CONFIG

    title: str = ""
    description: str | None = None


class CourseForUpdateDto(BaseModel):
    model_config = API_MODEL_CONFIG

    title: str = ""
    description: str | None = None
