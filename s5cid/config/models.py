from typing import Literal
from urllib.parse import urlsplit

from pydantic import BaseModel, Field, field_validator

from s5cid.url import DEFAULT_PORTAL_URL


class S5CidConfig(BaseModel):
    default_prefix: Literal["z", "u", "b"] = "z"
    max_size_bytes: int = Field(default=16, ge=1, le=16)
    hash_chunk_size: int = Field(default=1024 * 1024, gt=0)
    portal_url: str = DEFAULT_PORTAL_URL
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"

    @field_validator("portal_url")
    @classmethod
    def validate_portal_url(cls, v: str) -> str:
        parsed = urlsplit(v)
        if parsed.scheme not in ("http", "https"):
            raise ValueError(f"portal_url must use http or https scheme, got {parsed.scheme!r}")
        if not parsed.hostname:
            raise ValueError(f"portal_url has no host: {v!r}")
        # CIDs are added as a subdomain, so the portal itself carries no path
        if parsed.path not in ("", "/") or parsed.query or parsed.fragment:
            raise ValueError(f"portal_url must be a bare origin, got {v!r}")
        return v.rstrip("/")
