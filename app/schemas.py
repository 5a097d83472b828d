"""
Request Schemas

Pydantic models validating admin API bodies before they reach the
services. JSON bodies and form bodies (multipart uploads) share the same
schemas; form values arrive as strings and rely on pydantic's lax
coercion, nested fields arrive JSON-encoded.
"""

import json
import re
from typing import List, Literal, Optional, get_args

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

ProductCategory = Literal['apparel', 'accessories', 'peripherals', 'collectibles']
PRODUCT_CATEGORIES = get_args(ProductCategory)

# Positive integers that fit a signed 64-bit column
_ID_PATTERN = re.compile(r'[1-9][0-9]{0,17}')


class RequestModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra='ignore',
    )


def _decode_json(value):
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        try:
            return json.loads(value)
        except ValueError:
            raise ValueError('must be valid JSON')
    return value


def _decode_list(value):
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.startswith('['):
            return _decode_json(stripped)
        return [item.strip() for item in stripped.split(',') if item.strip()]
    return value


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


def is_valid_id(raw_id):
    return bool(_ID_PATTERN.fullmatch(raw_id or ''))


def format_validation_error(exc: ValidationError) -> str:
    """Flatten pydantic errors into a single client-facing message."""
    parts = []
    for err in exc.errors():
        loc = '.'.join(str(p) for p in err.get('loc', ()))
        parts.append(f"{loc}: {err.get('msg')}" if loc else err.get('msg'))
    return '; '.join(parts)


# =============================================================================
# NEWS
# =============================================================================

class NewsCreate(RequestModel):
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    image: str = ''
    author: Optional[str] = None


class NewsUpdate(RequestModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    content: Optional[str] = Field(None, min_length=1)
    image: Optional[str] = None
    author: Optional[str] = None


# =============================================================================
# PLAYERS
# =============================================================================

class SocialMedia(RequestModel):
    twitter: Optional[str] = None
    instagram: Optional[str] = None
    twitch: Optional[str] = None
    youtube: Optional[str] = None
    tiktok: Optional[str] = None


class PlayerStats(RequestModel):
    kills: int = Field(0, ge=0)
    deaths: int = Field(0, ge=0)
    assists: int = Field(0, ge=0)
    kd_ratio: float = Field(0.0, ge=0)


class _PlayerNested(RequestModel):

    @field_validator('social_media', 'stats', mode='before', check_fields=False)
    @classmethod
    def decode_objects(cls, value):
        return _decode_json(value)

    @field_validator('achievements', 'previous_teams', mode='before', check_fields=False)
    @classmethod
    def decode_lists(cls, value):
        return _decode_list(value)


class PlayerCreate(_PlayerNested):
    name: str = Field(min_length=1, max_length=100)
    nickname: str = Field(min_length=1, max_length=100)
    role: str = Field(min_length=1, max_length=50)
    game: str = Field(min_length=1, max_length=100)
    bio: str = ''
    image: str = ''
    social_media: Optional[SocialMedia] = None
    stats: Optional[PlayerStats] = None
    achievements: List[str] = Field(default_factory=list)
    previous_teams: List[str] = Field(default_factory=list)


class PlayerUpdate(_PlayerNested):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    nickname: Optional[str] = Field(None, min_length=1, max_length=100)
    role: Optional[str] = Field(None, min_length=1, max_length=50)
    game: Optional[str] = Field(None, min_length=1, max_length=100)
    bio: Optional[str] = None
    image: Optional[str] = None
    social_media: Optional[SocialMedia] = None
    stats: Optional[PlayerStats] = None
    achievements: Optional[List[str]] = None
    previous_teams: Optional[List[str]] = None


# =============================================================================
# PRODUCTS
# =============================================================================

class _ProductFields(RequestModel):

    @field_validator('in_stock', 'price', 'image', mode='before', check_fields=False)
    @classmethod
    def blank_is_missing(cls, value):
        return _blank_to_none(value)


class ProductCreate(_ProductFields):
    name: str = Field(min_length=1, max_length=150)
    description: str = ''
    price: float = Field(ge=0)
    image: Optional[str] = None
    category: ProductCategory
    in_stock: Optional[bool] = True

    @field_validator('in_stock')
    @classmethod
    def default_in_stock(cls, value):
        return True if value is None else value


class ProductUpdate(_ProductFields):
    name: Optional[str] = Field(None, min_length=1, max_length=150)
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    image: Optional[str] = None
    category: Optional[ProductCategory] = None
    in_stock: Optional[bool] = None
