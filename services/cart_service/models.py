from sqlalchemy import Column, Integer

from shared.config.database import Base


class CartEntry(Base):
    __tablename__ = "cart"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # No foreign keys: user/product existence is checked by the callers
    user_id = Column(Integer)
    product_id = Column(Integer)
