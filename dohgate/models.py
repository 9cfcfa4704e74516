from typing import List

from pydantic import BaseModel, ConfigDict, Field

UINT16_MAX = 2**16 - 1
UINT32_MAX = 2**32 - 1


class RawQuestion(BaseModel):
    name: str = ""
    type: int = Field(0, ge=0, le=UINT16_MAX)


class RawAnswer(BaseModel):
    """One record of the Answer, Authority or Additional list of a DoH JSON reply."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    type: int = Field(0, ge=0, le=UINT16_MAX)
    ttl: int = Field(0, alias="TTL", ge=0, le=UINT32_MAX)
    data: str = ""


class ResolutionResult(BaseModel):
    """Body of a DoH JSON API reply (Google / Cloudflare ``application/dns-json``).

    Every field has a default so that a partial or empty payload still yields
    a usable result: status 0, all flags cleared and empty sections. Type
    codes, TTLs and the status must fit their wire widths, otherwise the
    payload fails validation as a whole.
    """

    model_config = ConfigDict(populate_by_name=True)

    status: int = Field(0, alias="Status", ge=0, le=UINT16_MAX)
    tc: bool = Field(False, alias="TC")
    rd: bool = Field(False, alias="RD")
    ra: bool = Field(False, alias="RA")
    ad: bool = Field(False, alias="AD")
    cd: bool = Field(False, alias="CD")
    questions: List[RawQuestion] = Field(default_factory=list, alias="Question")
    answers: List[RawAnswer] = Field(default_factory=list, alias="Answer")
    authority: List[RawAnswer] = Field(default_factory=list, alias="Authority")
    additional: List[RawAnswer] = Field(default_factory=list, alias="Additional")
    comment: str = Field("", alias="Comment")
