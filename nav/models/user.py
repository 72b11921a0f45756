from sqlalchemy import Column, Integer, String, DateTime
from datetime import datetime
from nav.core.database import Base
import bcrypt

class UserStatus:
    DISABLED = 0
    ACTIVE = 1

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    status = Column(Integer, default=UserStatus.ACTIVE, nullable=False)  # 1=actif, 0=désactivé
    created_at = Column(DateTime, default=datetime.utcnow)

    def set_password(self, password: str):
        self.password_hash = bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()

    def verify_password(self, password: str) -> bool:
        return bcrypt.checkpw(password.encode(), self.password_hash.encode())
