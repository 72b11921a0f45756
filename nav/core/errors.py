"""Exceptions métier levées par les services.

Les routers ne les attrapent pas: main.py enregistre un handler par classe
qui les convertit en réponse HTTP {"detail": message}.
"""


class NavError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(NavError):
    """Entité absente OU hors du périmètre de l'utilisateur (indiscernables)."""
    status_code = 404


class InvalidReorderError(NavError):
    """source == target, ou l'un des deux absent du scope ordonné."""
    status_code = 400


class ForbiddenError(NavError):
    status_code = 403


class ConflictError(NavError):
    status_code = 400


class StoreError(NavError):
    """Échec de persistance (I/O, transaction annulée). Jamais retenté ici."""
    status_code = 500
