from sqlalchemy import Column, Integer, String

from cretaceous_park.database import Base


class Animal(Base):
    __tablename__ = 'animals'
    id = Column(Integer, primary_key=True, index=True)
    species = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False, index=True)
    age = Column(Integer, nullable=False)

    def __repr__(self):
        return f'Animal ID:{self.id} Species:{self.species} Name:{self.name} Age:{self.age}'
