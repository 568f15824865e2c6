from typing import Optional
from fastapi import APIRouter, Depends, Body, Path, Query, Request, Response, status
from sqlalchemy.orm import Session
from cretaceous_park import schemas
from cretaceous_park import services
from cretaceous_park import database

router = APIRouter()


@router.get('', response_model=list[schemas.Animal], status_code=status.HTTP_200_OK, include_in_schema=False)
@router.get('/', response_model=list[schemas.Animal], status_code=status.HTTP_200_OK)
def get_animals(species: Optional[str] = Query(None, title='species'),
                name: Optional[str] = Query(None, title='name'),
                minimum_age: int = Query(0, alias='minimumAge', title='минимальный возраст, 0 - без фильтра'),
                db: Session = Depends(database.get_db)):
    """Список животных, фильтры непустые, объединяются через AND"""
    return services.animal.get_animals(db, species, name, minimum_age)


@router.get('/{animal_id}', response_model=schemas.Animal, status_code=status.HTTP_200_OK,
            responses={404: {'description': 'Animal not found'}})
def get_animal(animal_id: int = Path(..., title='id animal'),
               db: Session = Depends(database.get_db)):
    return services.animal.get_animal(db, animal_id)


@router.post('', response_model=schemas.Animal, status_code=status.HTTP_201_CREATED, include_in_schema=False)
@router.post('/', response_model=schemas.Animal, status_code=status.HTTP_201_CREATED,
             responses={400: {'description': 'Malformed animal'}})
def create_animal(request: Request, response: Response,
                  animal: schemas.AnimalIn = Body(...),
                  db: Session = Depends(database.get_db)):
    """Создать животное, id из тела игнорируется"""
    created = services.animal.create_animal(db, animal)
    response.headers['Location'] = str(request.url_for('get_animal', animal_id=created.id))
    return created


@router.put('/{animal_id}', status_code=status.HTTP_204_NO_CONTENT, response_class=Response,
            responses={400: {'description': 'Id mismatch'}, 404: {'description': 'Animal not found'}})
def update_animal(animal_id: int = Path(..., title='id animal'),
                  animal: schemas.AnimalIn = Body(...),
                  db: Session = Depends(database.get_db)):
    """Полная замена, id в теле должен совпадать с id в пути"""
    services.animal.update_animal(db, animal_id, animal)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete('/{animal_id}', status_code=status.HTTP_204_NO_CONTENT, response_class=Response,
               responses={404: {'description': 'Animal not found'}})
def delete_animal(animal_id: int = Path(..., title='id animal'),
                  db: Session = Depends(database.get_db)):
    services.animal.delete_animal(db, animal_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
