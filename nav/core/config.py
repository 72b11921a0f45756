from os import getenv

class Settings:
    DATABASE_URL = getenv("DATABASE_URL", "postgresql+psycopg://nav:nav@db:5432/nav")
    JWT_SECRET = getenv("JWT_SECRET", "dev-secret-change-in-prod")
    JWT_EXPIRE_MIN = int(getenv("JWT_EXPIRE_MIN", "21600"))  # expire au bout de 15 jours

    # l'utilisateur id=1 est le super admin (ne peut être ni supprimé ni désactivé)
    SUPER_ADMIN_ID = int(getenv("SUPER_ADMIN_ID", "1"))
    ADMIN_USERNAME = getenv("ADMIN_USERNAME", "admin")
    ADMIN_PASSWORD = getenv("ADMIN_PASSWORD", "admin123")

    LINKS_PER_PAGE = int(getenv("LINKS_PER_PAGE", "15"))
    ORDINAL_STEP = int(getenv("ORDINAL_STEP", "1000"))  # écart entre deux sort_order après renumérotation

    LOG_LEVEL = getenv("LOG_LEVEL", "INFO")

settings = Settings()
