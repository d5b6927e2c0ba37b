"""Request and result schemas for fs-tools."""

from typing import Optional, Union

from pydantic import BaseModel, Field, computed_field, field_validator


class ListingRequest(BaseModel):
    """Parameters for a file listing."""
    path: str = Field(..., min_length=1, description="Directory to list")
    recursive: bool = Field(default=False, description="Descend into subdirectories")
    contains: Optional[str] = Field(
        default=None, description="Only keep files whose name contains this text"
    )


class FileListing(BaseModel):
    """Result of a file listing."""
    path: str = Field(..., description="Directory that was listed")
    recursive: bool = False
    contains: Optional[str] = None
    files: list[str] = Field(default_factory=list, description="Paths of files found")

    @computed_field
    @property
    def count(self) -> int:
        return len(self.files)


class WriteRequest(BaseModel):
    """Parameters for writing a file."""
    path: str = Field(..., min_length=1, description="File to write")
    content: bytes = Field(default=b"", description="Bytes to write")
    mode: int = Field(default=0o644, description="Permission bits for the file")

    @field_validator("mode", mode="before")
    @classmethod
    def parse_octal_mode(cls, value: Union[int, str]) -> int:
        """Accept octal strings such as ``"644"`` or ``"0o644"``."""
        if isinstance(value, str):
            text = value.strip().lower()
            if text.startswith("0o"):
                text = text[2:]
            try:
                value = int(text, 8)
            except ValueError:
                raise ValueError(f"mode must be an octal number, got {value!r}")
        if not 0 <= value <= 0o7777:
            raise ValueError(f"mode must be between 0 and 0o7777, got {oct(value)}")
        return value
