"""
News item and taxonomy type definitions.

Defines the core data structures for representing news records as they
flow from the shard resolver through classification and grouping.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NewsItem(BaseModel):
    """A single news record as stored in a shard."""

    model_config = ConfigDict(frozen=True, extra="allow")

    headline: str = Field("", description="Headline text")
    teaser: str = Field("", description="Short teaser paragraph")
    category: Optional[str] = Field(None, description="Free-form category from the scraper")
    source_url: str = Field("", description="Link to the original article")
    source_name: str = Field("", description="Display name of the source")
    emoji: Optional[str] = Field(None, description="Emoji marker shown next to the headline")
    warning: Optional[str] = Field(None, description="Optional content warning")
    ignore: Optional[bool] = Field(None, description="If true, the viewer hides the record")

    @field_validator("headline", "teaser", "source_url", "source_name", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value)

    @field_validator("category", "emoji", "warning", mode="before")
    @classmethod
    def _stringify_optional(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        return str(value)

    @property
    def is_ignored(self) -> bool:
        return self.ignore is True

    def to_dict(self) -> Dict[str, Any]:
        """Return the record as stored: only the keys it arrived with, extras included."""
        stored = self.model_fields_set | set(self.model_extra or {})
        return {k: v for k, v in self.model_dump(mode="json").items() if k in stored}


@dataclass(frozen=True)
class TaxonomyEntry:
    """Result of classifying a raw category string."""

    group: str
    sub: Optional[str]  # Only set when group is Österreich
    original: str


@dataclass(frozen=True)
class ClassifiedItem:
    """A news item with its taxonomy entry and precomputed football flag."""

    item: NewsItem
    taxonomy: TaxonomyEntry
    is_football: bool = False

    @property
    def group(self) -> str:
        return self.taxonomy.group

    @property
    def sub(self) -> Optional[str]:
        return self.taxonomy.sub

    @property
    def is_sport(self) -> bool:
        """True for the top-level Sport group and for Österreich > Sport."""
        # Imported here: backend.classification imports this module.
        from backend.classification.taxonomy import AUSTRIA_GROUP, SPORT

        if self.taxonomy.group == SPORT:
            return True
        return self.taxonomy.group == AUSTRIA_GROUP and self.taxonomy.sub == SPORT

    def to_dict(self) -> Dict[str, Any]:
        data = self.item.to_dict()
        data.update(
            group=self.taxonomy.group,
            sub=self.taxonomy.sub,
            original=self.taxonomy.original,
        )
        return data


@dataclass
class NewsGroup:
    """Items sharing one display group, already prioritized."""

    name: str
    subs: List[str] = field(default_factory=list)
    items: List[ClassifiedItem] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "subs": list(self.subs),
            "items": [i.to_dict() for i in self.items],
        }
