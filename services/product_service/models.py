from sqlalchemy import Column, Integer, Numeric, String

from shared.config.database import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String)
    price = Column(Numeric(10, 2))
    description = Column(String)
