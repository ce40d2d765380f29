from typing import Optional
from pydantic import BaseModel


class AddressFormatOptions(BaseModel):
    test_only: bool = False
    bounceable: bool = True
    url_safe: bool = True

    class Config:
        frozen = True


class AddressConvertRequest(BaseModel):
    address: str


class AddressConvertResponse(BaseModel):
    original: str
    raw: str
    friendly_bounceable: str
    friendly_non_bounceable: str
    normalized: str
    is_bounceable: Optional[bool] = None
    is_test_only: Optional[bool] = None
