from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator
from types import MappingProxyType
from typing import Dict, Mapping, Optional
from datetime import datetime


class StringProperties(BaseModel):
    """Properties computed once when a string is analyzed"""
    model_config = ConfigDict(frozen=True)

    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Mapping[str, int]

    @field_validator("character_frequency_map")
    @classmethod
    def freeze_frequency_map(cls, v: Mapping[str, int]) -> Mapping[str, int]:
        return MappingProxyType(dict(v))

    @field_serializer("character_frequency_map")
    def serialize_frequency_map(self, v: Mapping[str, int]) -> Dict[str, int]:
        return dict(v)


class StringRecord(BaseModel):
    """An analyzed string, addressed by the SHA-256 of its value"""
    model_config = ConfigDict(frozen=True)

    id: str
    value: str
    properties: StringProperties
    created_at: datetime


class FilterSpec(BaseModel):
    """
    Optional, independently combinable constraints over stored strings.
    A field left as None does not restrict the result.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    is_palindrome: Optional[bool] = Field(None, strict=True)
    min_length: Optional[int] = Field(None, ge=0, strict=True)
    max_length: Optional[int] = Field(None, ge=0, strict=True)
    word_count: Optional[int] = Field(None, ge=0, strict=True)
    contains_character: Optional[str] = Field(None, min_length=1, max_length=1, strict=True)

    @model_validator(mode="after")
    def check_length_bounds(self) -> "FilterSpec":
        if (
            self.min_length is not None
            and self.max_length is not None
            and self.min_length > self.max_length
        ):
            raise ValueError("min_length cannot be greater than max_length")
        return self

    def applied(self) -> Dict:
        """Only the constraints that are set"""
        return self.model_dump(exclude_none=True)
