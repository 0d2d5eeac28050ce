from sqlalchemy import Column, String, Integer, ForeignKey
from sqlalchemy.orm import relationship

from models.base_model import BaseModel


class MovieModel(BaseModel):
    __tablename__ = "movies"

    title = Column(String, index=True, nullable=False)
    year = Column(Integer, index=True, nullable=False)
    duration = Column(Integer, nullable=False)
    category_id = Column(Integer, ForeignKey('categories.id_key', ondelete="CASCADE"), index=True, nullable=False)

    category = relationship("CategoryModel", back_populates="movies", lazy="select")

    def __repr__(self):
        return f"<MovieModel id_key={self.id_key} title={self.title!r} year={self.year} duration={self.duration}>"
