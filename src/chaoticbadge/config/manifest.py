"""Batch manifest models.

A manifest is a JSON document listing badges to render in one run:

    {"badges": [{"label": "build", "status": "passing"},
                {"label": "nuget", "status": "release", "status_text": "1.2.0"}]}
"""

import re
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from chaoticbadge.domain import Status
from chaoticbadge.exceptions import ManifestError

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


class BadgeRequest(BaseModel):
    """One badge to render."""

    label: str = Field(description="Text of the left block")
    status: Status = Field(default=Status.PASSING, description="Status classification")
    status_text: str | None = Field(
        default=None,
        description="Text of the right block (default: from the status table)",
    )
    left_color: str | None = Field(default=None, description="Left block hex color override")
    right_color: str | None = Field(default=None, description="Right block hex color override")
    icon: Path | None = Field(default=None, description="SVG icon drawn before the label")
    output: str | None = Field(
        default=None,
        description="Output file name (default: derived from the label)",
    )

    def output_name(self) -> str:
        """Return the file name this badge is written to."""
        if self.output:
            return self.output
        stem = _UNSAFE_FILENAME_CHARS.sub("-", self.label).strip("-") or "badge"
        return f"{stem}.svg"


class BadgeManifest(BaseModel):
    """A list of badges to render together."""

    badges: list[BadgeRequest] = Field(default_factory=list)


def load_manifest(path: Path) -> BadgeManifest:
    """Read and validate a manifest file.

    Args:
        path: Path to the JSON manifest

    Returns:
        Validated manifest

    Raises:
        ManifestError: If the file cannot be read or does not validate
    """
    try:
        data = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ManifestError(str(path), str(e)) from e

    try:
        return BadgeManifest.model_validate_json(data)
    except ValidationError as e:
        raise ManifestError(str(path), f"{e.error_count()} validation error(s)") from e
