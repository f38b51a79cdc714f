"""Request and response bodies. KSUID fields travel as 27 character text."""

import base64
import binascii

from pydantic import BaseModel, Field, model_validator

from ksuid import KSUID


class GenerateResponse(BaseModel):
    count: int
    ids: list[KSUID]


class KSUIDInfo(BaseModel):
    id: KSUID
    hex: str
    base64: str
    raw_timestamp: int
    unix: int
    timestamp: str
    payload: str


class LoadRequest(BaseModel):
    """Raw 20 bytes, given as either base64 or hex."""

    base64: str | None = None
    hex: str | None = None

    @model_validator(mode="after")
    def _one_encoding(self):
        if (self.base64 is None) == (self.hex is None):
            raise ValueError("exactly one of 'base64' or 'hex' is required")
        return self

    def raw_bytes(self):
        try:
            if self.base64 is not None:
                return base64.b64decode(self.base64, validate=True)
            return bytes.fromhex(self.hex)
        except (binascii.Error, ValueError) as exc:
            raise ValueError("undecodable byte string") from exc


class SortRequest(BaseModel):
    ids: list[KSUID] = Field(min_length=1)


class SortResponse(BaseModel):
    ids: list[KSUID]
    oldest: KSUID
    newest: KSUID
