"""Pydantic models for the vault configuration file."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Share(BaseModel):
    """A directory to back up, stored under a top-level share name.

    The share name becomes the top-level "folder" in the object store; the
    directory is backed up recursively beneath it.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(default="", alias="Name")
    dir: str = Field(default="", alias="Dir")


class Config(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    shares: list[Share] = Field(default_factory=list, alias="Shares")

    @field_validator("shares", mode="before")
    @classmethod
    def null_shares(cls, v: object) -> object:
        # Older files store an empty share list as null
        if v is None:
            return []
        return v

    def add_share(self, name: str, dir: str) -> Share:
        """Append a share. Duplicates are kept, order is insertion order."""
        share = Share(name=name, dir=dir)
        self.shares.append(share)
        return share

    def to_json_dict(self) -> dict:
        """The on-disk representation, with the capitalized key names."""
        return self.model_dump(by_alias=True)
