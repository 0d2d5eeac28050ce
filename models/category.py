from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from models.base_model import BaseModel


class CategoryModel(BaseModel):
    __tablename__ = "categories"

    name = Column(String, index=True, nullable=False)

    # Deleting a category deletes its movies
    movies = relationship("MovieModel", back_populates="category", cascade="all, delete-orphan",
                          passive_deletes=True, lazy="select", order_by="MovieModel.title")
