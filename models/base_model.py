from sqlalchemy import Column, Integer
from sqlalchemy.orm import declarative_base


base = declarative_base()


class BaseModel(base):
    """Common identity column shared by categories and movies."""

    __abstract__ = True

    id_key = Column(Integer, primary_key=True, autoincrement=True)

    def __repr__(self):
        return f"<{type(self).__name__} id_key={self.id_key}>"
