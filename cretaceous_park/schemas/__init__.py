from .animal import Animal, AnimalIn, INT_MIN, INT_MAX
