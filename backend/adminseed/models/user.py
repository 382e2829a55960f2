from datetime import date, datetime

from sqlalchemy import String, Integer, Date, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column
from adminseed.db.base import Base

class User(Base):
    __tablename__ = "Usuario"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    names: Mapped[str] = mapped_column(String(128))
    lastnames: Mapped[str] = mapped_column(String(128))
    birthdate: Mapped[date] = mapped_column(Date)
    phoneCode: Mapped[str] = mapped_column(String(8))
    phoneNumber: Mapped[str] = mapped_column(String(32))
    password: Mapped[str] = mapped_column(String(255))
    role: Mapped[str] = mapped_column(String(16), default="user", server_default="user")
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
