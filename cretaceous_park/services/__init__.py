from . import animal
