from __future__ import annotations

from pydantic import BaseModel, Field


class Greeting(BaseModel):
    msg: str


class User(BaseModel):
    id: int
    username: str = Field(min_length=1)
    displayname: str


class Product(BaseModel):
    id: int
    name: str = Field(min_length=1)
    price: float = Field(ge=0)
