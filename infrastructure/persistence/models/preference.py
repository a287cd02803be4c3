from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
	pass


class UserProfileDB(Base):
	__tablename__ = 'user_profiles'

	user_id: Mapped[str] = mapped_column(String(64), primary_key=True)
	preferred_currency: Mapped[str] = mapped_column(String(5), nullable=False)
	updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
