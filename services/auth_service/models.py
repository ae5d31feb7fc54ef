from sqlalchemy import Column, Integer, String

from shared.config.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String, unique=True, nullable=False)
    # bcrypt hash; the column keeps its historical name
    password_hash = Column("password", String, nullable=False)
