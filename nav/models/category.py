"""Category model"""

from sqlalchemy import Column, Integer, String, ForeignKey
from nav.core.database import Base


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    name = Column(String, nullable=False)
    sort_order = Column(Integer, default=0, nullable=False, index=True)  # position relative parmi les catégories de l'user
