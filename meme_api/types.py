from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from ._serialization import parse_datetime


class ErrorCategory(str, Enum):
    TIMEOUT = "timeout"
    BACKEND = "backend"
    CONNECTION = "connection"
    PARSE = "parse"
    UNKNOWN = "unknown"


@dataclass
class MemeError(Exception):
    category: ErrorCategory
    message: str
    http_status: Optional[int] = None
    raw_backend: Optional[Any] = None

    def __str__(self) -> str:
        if self.http_status is not None:
            return f"{self.category.value}: {self.message} (HTTP {self.http_status})"
        return f"{self.category.value}: {self.message}"

    @property
    def is_not_found(self) -> bool:
        return self.http_status == 404


def _str_list(value: Any) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    return [str(v) for v in value]


@dataclass
class MemeParams:
    min_images: int = 0
    max_images: int = 0
    min_texts: int = 0
    max_texts: int = 0
    default_texts: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "MemeParams":
        data = data or {}
        return cls(
            min_images=int(data.get("min_images", 0)),
            max_images=int(data.get("max_images", 0)),
            min_texts=int(data.get("min_texts", 0)),
            max_texts=int(data.get("max_texts", 0)),
            default_texts=_str_list(data.get("default_texts")),
        )


@dataclass
class MemeShortcut:
    pattern: str
    humanized: Optional[str] = None
    names: List[str] = field(default_factory=list)
    texts: List[str] = field(default_factory=list)
    options: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MemeShortcut":
        # older backends call the pattern "key"
        pattern = data.get("pattern") or data.get("key")
        if not pattern:
            raise MemeError(ErrorCategory.PARSE, "Shortcut without pattern", raw_backend=data)
        return cls(
            pattern=str(pattern),
            humanized=data.get("humanized"),
            names=_str_list(data.get("names")),
            texts=_str_list(data.get("texts") or data.get("args")),
            options=dict(data.get("options") or {}),
        )


@dataclass
class MemeInfo:
    """
    One meme advertised by the backend.

    Only `key` is required; everything else falls back to empty values so a
    backend that omits optional fields still yields a usable command.
    """
    key: str
    params: MemeParams = field(default_factory=MemeParams)
    keywords: List[str] = field(default_factory=list)
    shortcuts: List[MemeShortcut] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    date_created: Optional[datetime] = None
    date_modified: Optional[datetime] = None
    raw: Optional[Dict[str, Any]] = None

    @classmethod
    def from_dict(cls, data: Any) -> "MemeInfo":
        if not isinstance(data, dict):
            raise MemeError(ErrorCategory.PARSE, "Meme info is not an object", raw_backend=data)
        key = data.get("key")
        if not key:
            raise MemeError(ErrorCategory.PARSE, "Meme info without key", raw_backend=data)
        try:
            return cls(
                key=str(key),
                params=MemeParams.from_dict(data.get("params")),
                keywords=_str_list(data.get("keywords")),
                shortcuts=[MemeShortcut.from_dict(s) for s in data.get("shortcuts") or []],
                tags=_str_list(data.get("tags")),
                date_created=parse_datetime(data.get("date_created")),
                date_modified=parse_datetime(data.get("date_modified")),
                raw=data,
            )
        except (TypeError, ValueError, AttributeError) as exc:
            raise MemeError(
                ErrorCategory.PARSE, f"Malformed info for meme '{key}': {exc}", raw_backend=data
            ) from exc
