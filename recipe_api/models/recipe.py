from .base import Base

from sqlalchemy import Column, Integer, Text
from sqlalchemy.dialects.postgresql import ARRAY


class Recipe(Base):
    __tablename__ = "recipes"

    id = Column(Integer, primary_key=True)
    name = Column(Text)
    ingredients = Column(ARRAY(Text))
    instructions = Column(Text)
