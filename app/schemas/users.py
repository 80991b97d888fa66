from typing import Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, StrictStr


class CheckUserExistsIn(BaseModel):
    # any non-empty string; syntax is left to the directory
    email: StrictStr = Field(min_length=1)


class UserFoundOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    exists: Literal[True] = True
    uid: str
    name: Optional[str] = None
    photo_url: Optional[str] = Field(default=None, alias="photoUrl")


class UserNotFoundOut(BaseModel):
    exists: Literal[False] = False


CheckUserExistsOut = Union[UserFoundOut, UserNotFoundOut]


class AccountRecord(BaseModel):
    """Directory-side view of a user account."""
    uid: str
    display_name: Optional[str] = None
    photo_url: Optional[str] = None
