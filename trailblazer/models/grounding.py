"""
Grounding citations attached to a model answer.

The generative service returns these loosely typed; every field is optional and
unknown keys are ignored so SDK objects and plain dicts validate the same way.
"""
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class _Loose(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class GroundingPhoto(_Loose):
    uri: Optional[str] = None


class WebSource(_Loose):
    title: Optional[str] = None
    uri: Optional[str] = None


class MapsSource(_Loose):
    title: Optional[str] = None
    uri: Optional[str] = None
    photos: List[GroundingPhoto] = []

    @field_validator("photos", mode="before")
    @classmethod
    def _null_photos_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class GroundingChunk(_Loose):
    web: Optional[WebSource] = None
    maps: Optional[MapsSource] = None

    @property
    def titles(self) -> List[str]:
        return [
            source.title
            for source in (self.web, self.maps)
            if source is not None and source.title
        ]

    @property
    def uri(self) -> Optional[str]:
        """Maps link when present, otherwise the web link."""
        if self.maps is not None and self.maps.uri:
            return self.maps.uri
        if self.web is not None and self.web.uri:
            return self.web.uri
        return None

    @property
    def photo_uri(self) -> Optional[str]:
        if self.maps is None:
            return None
        for photo in self.maps.photos[:1]:
            if photo.uri:
                return photo.uri
        return None

    @classmethod
    def from_raw(cls, raw: Any) -> "GroundingChunk":
        """Build from a dict, an SDK pydantic object or an existing chunk."""
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, dict):
            return cls.model_validate(raw)
        dump = getattr(raw, "model_dump", None)
        if dump is not None:
            return cls.model_validate(dump(exclude_none=True))
        return cls.model_validate(raw, from_attributes=True)
