"""
서비스 계층으로 들어오는 사용자 입력의 형식을 정의합니다.
username 길이와 이메일 문법 검사는 모두 여기서 이루어집니다.
"""
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, ValidationError, field_validator

from apollo.database.models.user import USERNAME_MIN_LENGTH, USERNAME_MAX_LENGTH


def _lowercase(value):
    # 저장되는 값(소문자) 기준으로 길이를 검사하기 위해 먼저 정규화합니다.
    # (예: "İ".lower()는 두 글자가 됩니다)
    return value.lower() if isinstance(value, str) else value


class UserCreateRequest(BaseModel):
    username: str = Field(..., min_length=USERNAME_MIN_LENGTH, max_length=USERNAME_MAX_LENGTH)
    primary_email: EmailStr

    @field_validator("username", mode="before")
    @classmethod
    def _lowercase_username(cls, value):
        return _lowercase(value)


class UserUpdateRequest(BaseModel):
    """부분 수정용. None인 필드는 변경하지 않습니다."""
    username: Optional[str] = Field(default=None, min_length=USERNAME_MIN_LENGTH, max_length=USERNAME_MAX_LENGTH)
    primary_email: Optional[EmailStr] = None

    @field_validator("username", mode="before")
    @classmethod
    def _lowercase_username(cls, value):
        return _lowercase(value)


class TopicCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)


def parse(schema, **data):
    """
    스키마로 입력을 검증합니다.

    Raises:
        ValueError: 입력이 스키마를 만족하지 않을 때. (pydantic 오류 메시지를 그대로 담습니다)
    """
    try:
        return schema(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid input: {e.errors(include_url=False)}") from e
