from typing import Optional
from sqlalchemy import and_, exists, false, select, true
from sqlalchemy.orm import Session, make_transient_to_detached
from sqlalchemy.orm.attributes import flag_modified
from sqlalchemy.sql.elements import ColumnElement
from cretaceous_park import models
from cretaceous_park import schemas

REPLACEABLE_FIELDS = ('species', 'name', 'age')


def fits_id_column(animal_id: int) -> bool:
    """Id вне диапазона колонки не может существовать в базе"""
    return schemas.INT_MIN <= animal_id <= schemas.INT_MAX


def build_animal_filter(species: Optional[str] = None, name: Optional[str] = None,
                        minimum_age: Optional[int] = None) -> ColumnElement[bool]:
    """Один предикат для списка: AND по всем непустым фильтрам.
    minimum_age учитывается только если он строго больше нуля, 0 означает "без фильтра"."""
    clauses = []
    if species:
        clauses.append(models.Animal.species == species)
    if name:
        clauses.append(models.Animal.name == name)
    if minimum_age is not None and minimum_age > 0:
        # возраст больше INT_MAX хранить нельзя, значит никто не подходит
        clauses.append(models.Animal.age >= minimum_age if minimum_age <= schemas.INT_MAX else false())
    if not clauses:
        return true()
    return and_(*clauses)


def get_animals(db: Session, species: Optional[str] = None, name: Optional[str] = None,
                minimum_age: Optional[int] = None) -> list[schemas.Animal]:
    stmt = select(models.Animal).where(build_animal_filter(species, name, minimum_age))
    return [schemas.Animal.model_validate(row) for row in db.execute(stmt).scalars().all()]


def get_animal(db: Session, animal_id: int) -> Optional[schemas.Animal]:
    if not fits_id_column(animal_id):
        return None
    animal_model = db.get(models.Animal, animal_id)
    if animal_model is None:
        return None
    return schemas.Animal.model_validate(animal_model)


def animal_exists(db: Session, animal_id: int) -> bool:
    if not fits_id_column(animal_id):
        return False
    return bool(db.execute(select(exists().where(models.Animal.id == animal_id))).scalar())


def create_animal(db: Session, animal: schemas.AnimalIn) -> schemas.Animal:
    """Создать животное. id из запроса игнорируется, его выдает база"""
    animal_model = models.Animal(species=animal.species, name=animal.name, age=animal.age)
    db.add(animal_model)
    db.commit()
    db.refresh(animal_model)
    return schemas.Animal.model_validate(animal_model)


def update_animal(db: Session, animal_id: int, animal: schemas.AnimalIn):
    """Полная замена полей без предварительного SELECT.
    Если UPDATE не задел ни одной строки, flush бросает StaleDataError."""
    animal_model = models.Animal(id=animal_id, species=animal.species, name=animal.name, age=animal.age)
    make_transient_to_detached(animal_model)
    animal_model = db.merge(animal_model, load=False)
    for field in REPLACEABLE_FIELDS:
        flag_modified(animal_model, field)
    db.commit()


def delete_animal(db: Session, animal_id: int) -> bool:
    """Возвращает False, если удалять нечего"""
    if not fits_id_column(animal_id):
        return False
    animal_model = db.get(models.Animal, animal_id)
    if animal_model is None:
        return False
    db.delete(animal_model)
    db.commit()
    return True
