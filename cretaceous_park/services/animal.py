import logging
from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError
from cretaceous_park import repositories
from cretaceous_park import schemas
from cretaceous_park.utils import exceptions

logger = logging.getLogger(__name__)


def get_animals(db: Session, species: Optional[str] = None, name: Optional[str] = None,
                minimum_age: Optional[int] = None) -> list[schemas.Animal]:
    return repositories.get_animals(db, species, name, minimum_age)


def get_animal(db: Session, animal_id: int) -> schemas.Animal:
    animal = repositories.get_animal(db, animal_id)
    if animal is None:
        raise exceptions.not_found_exception('Animal not found')
    return animal


def create_animal(db: Session, data: schemas.AnimalIn) -> schemas.Animal:
    animal = repositories.create_animal(db, data)
    logger.info('Created %r', animal)
    return animal


def update_animal(db: Session, animal_id: int, data: schemas.AnimalIn):
    if data.id != animal_id:
        raise exceptions.bad_request_exception('Animal id in path and body must match')
    try:
        repositories.update_animal(db, animal_id, data)
    except StaleDataError:
        db.rollback()
        if not repositories.animal_exists(db, animal_id):
            logger.info('Animal %s vanished before update', animal_id)
            raise exceptions.not_found_exception('Animal not found')
        logger.warning('Unresolved concurrent update of animal %s', animal_id)
        raise
    logger.info('Updated animal %s', animal_id)


def delete_animal(db: Session, animal_id: int):
    if not repositories.delete_animal(db, animal_id):
        raise exceptions.not_found_exception('Animal not found')
    logger.info('Deleted animal %s', animal_id)
