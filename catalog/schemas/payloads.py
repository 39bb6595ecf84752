# catalog/schemas/payloads.py
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

class PayloadBase(BaseModel):
    # No payload carries id or library_id
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class LibraryCreate(PayloadBase):
    name: str = Field(min_length=1)
    scope: str = Field(min_length=1)
    active: bool = True
    notes: Optional[str] = None

class LibraryUpdate(PayloadBase):
    name: Optional[str] = Field(None, min_length=1)
    scope: Optional[str] = Field(None, min_length=1)
    active: Optional[bool] = None
    notes: Optional[str] = None

class AuthorCreate(PayloadBase):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    active: bool = True
    notes: Optional[str] = None

class AuthorUpdate(PayloadBase):
    first_name: Optional[str] = Field(None, min_length=1)
    last_name: Optional[str] = Field(None, min_length=1)
    active: Optional[bool] = None
    notes: Optional[str] = None

class SeriesCreate(PayloadBase):
    name: str = Field(min_length=1)
    active: bool = True
    copyright: Optional[str] = None
    notes: Optional[str] = None

class SeriesUpdate(PayloadBase):
    name: Optional[str] = Field(None, min_length=1)
    active: Optional[bool] = None
    copyright: Optional[str] = None
    notes: Optional[str] = None

class StoryCreate(SeriesCreate):
    pass

class StoryUpdate(SeriesUpdate):
    pass

class VolumeCreate(PayloadBase):
    name: str = Field(min_length=1)
    active: bool = True
    copyright: Optional[str] = None
    google_id: Optional[str] = None
    isbn: Optional[str] = None
    location: Optional[str] = None
    notes: Optional[str] = None
    read: bool = False
    type: Optional[str] = None

class VolumeUpdate(PayloadBase):
    name: Optional[str] = Field(None, min_length=1)
    active: Optional[bool] = None
    copyright: Optional[str] = None
    google_id: Optional[str] = None
    isbn: Optional[str] = None
    location: Optional[str] = None
    notes: Optional[str] = None
    read: Optional[bool] = None
    type: Optional[str] = None

class UserCreate(PayloadBase):
    name: str = Field(min_length=1)
    password: str = Field(min_length=1)
    scope: str
    username: str = Field(min_length=1)
    active: bool = True
    notes: Optional[str] = None

class UserUpdate(PayloadBase):
    name: Optional[str] = Field(None, min_length=1)
    # Blank or missing keeps the stored password
    password: Optional[str] = None
    scope: Optional[str] = None
    username: Optional[str] = Field(None, min_length=1)
    active: Optional[bool] = None
    notes: Optional[str] = None
