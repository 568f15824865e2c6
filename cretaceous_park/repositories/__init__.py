from .animal import (
    build_animal_filter,
    get_animals,
    get_animal,
    animal_exists,
    create_animal,
    update_animal,
    delete_animal
)
