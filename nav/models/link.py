from sqlalchemy import Column, Integer, String, ForeignKey
from nav.core.database import Base

class Link(Base):
    __tablename__ = "links"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    category_id = Column(Integer, ForeignKey("categories.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=False)
    url = Column(String, nullable=False)
    icon = Column(String, default="")  # "" = icône par défaut
    sort_order = Column(Integer, default=0, nullable=False, index=True)  # comparé seulement dans la même catégorie
