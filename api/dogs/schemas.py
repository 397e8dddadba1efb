"""
Dog documents and response shapes.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from core.documents import Document


class Dog(Document):
    name: str = Field(..., min_length=1)
    breed: str = Field(..., min_length=1)
    age: int = Field(default=0, ge=0)


class DogResponse(BaseModel):
    name: str
    breed: str
    age: int


def placeholder_dog() -> Dog:
    return Dog(name="unknown", breed="unknown", age=0)


def to_response(dog: Dog) -> DogResponse:
    return DogResponse(name=dog.name, breed=dog.breed, age=dog.age)
