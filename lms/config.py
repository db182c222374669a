"""
Application configuration and seed data.
"""

from typing import Annotated, Any, Dict, List, Union

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError
from pydantic import field_validator, model_validator

from .core.enums import Role
from .core.exceptions import ConfigurationError
from .core.validator import MAX_STRING_LENGTH, is_valid_email

ContentItem = Annotated[str, Field(min_length=1, max_length=MAX_STRING_LENGTH)]


def _check_email(value: str) -> str:
    if not is_valid_email(value):
        raise ValueError(f"invalid email: {value!r}")
    return value


class SeedUser(BaseModel):
    username: str = Field(..., min_length=1, max_length=MAX_STRING_LENGTH)
    email: str
    password: str = Field(..., min_length=1)
    role: Role

    @field_validator("email")
    @classmethod
    def _valid_email(cls, v):
        return _check_email(v)


class SeedCourse(BaseModel):
    name: str = Field(..., min_length=1, max_length=MAX_STRING_LENGTH)
    teacher_email: str
    contents: List[ContentItem] = Field(default_factory=list)

    @field_validator("teacher_email")
    @classmethod
    def _valid_teacher_email(cls, v):
        return _check_email(v)


def _default_users() -> List[SeedUser]:
    return [
        SeedUser(username="admin1", email="admin1@example.com", password="adminpass", role=Role.ADMIN),
        SeedUser(username="teacher1", email="teacher1@example.com", password="teacherpass", role=Role.TEACHER),
        SeedUser(username="teacher2", email="teacher2@example.com", password="teacherpass", role=Role.TEACHER),
    ]


def _default_courses() -> List[SeedCourse]:
    return [
        SeedCourse(name="Mathematics", teacher_email="teacher1@example.com",
                   contents=["Introduction to Algebra", "Advanced Calculus"]),
        SeedCourse(name="Physics", teacher_email="teacher2@example.com",
                   contents=["Newton's Laws", "Thermodynamics"]),
    ]


class LMSConfig(BaseModel):
    """Settings for one application run."""
    seed_users: List[SeedUser] = Field(default_factory=_default_users)
    seed_courses: List[SeedCourse] = Field(default_factory=_default_courses)
    log_level: str = Field("WARNING", pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$')

    @model_validator(mode="after")
    def _unique_user_emails(self):
        seen = set()
        for user in self.seed_users:
            if user.email in seen:
                raise ValueError(f"duplicate seed user email: {user.email}")
            seen.add(user.email)
        return self


def load_config(config: Union[LMSConfig, Dict[str, Any], None] = None) -> LMSConfig:
    """Validate a plain configuration dict. An ``LMSConfig`` is returned as is."""
    if isinstance(config, LMSConfig):
        return config
    try:
        return LMSConfig.model_validate(config or {})
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}", error_code="invalid_config")
