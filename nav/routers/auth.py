from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from nav.core.database import get_db
from nav.core.deps import get_current_user
from nav.core.security import create_access_token
from nav.models.user import User
from nav.schemas.user import LoginRequest, TokenResponse, UserResponse
from nav.services.user_service import authenticate

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/login", response_model=TokenResponse)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """Se connecter et recevoir le token"""

    # compte désactivé -> ForbiddenError (403) levée par le service
    user = authenticate(db, credentials.username, credentials.password)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid username or password")

    access_token = create_access_token(user.id, user.username)

    return {
        "access_token": access_token,
        "token_type": "bearer",
        "user": user
    }

@router.get("/me", response_model=UserResponse)
def me(current_user: User = Depends(get_current_user)):
    # Vérifie le token et renvoie l'user courant
    return current_user
