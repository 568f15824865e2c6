from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

# границы колонки Integer (int4)
INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1


class AnimalBase(BaseModel):
    species: str
    name: str
    age: int = Field(..., ge=0, le=INT_MAX)


class Animal(AnimalBase):
    id: int

    model_config = ConfigDict(from_attributes=True)


# тело запроса на создание и обновление: id необязателен, при создании игнорируется
class AnimalIn(AnimalBase):
    id: Optional[int] = Field(None, ge=INT_MIN, le=INT_MAX)

    model_config = ConfigDict(json_schema_extra={
        'example': {'species': 'T-Rex', 'name': 'Rex', 'age': 5}
    })
