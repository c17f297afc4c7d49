"""
Erreurs du domaine SmokeLess.
Les services levent ces exceptions, les routers les traduisent en codes HTTP.
"""


class SmokelessError(Exception):
    """Erreur de base du domaine"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(SmokelessError):
    """Entree invalide : fenetre eveil/coucher inversee, objectif hors bornes, format horaire..."""


class DuplicateDayError(ValidationError):
    """Un Day existe deja pour cette date"""


class NotFoundError(SmokelessError):
    """Day, rappel ou preference introuvable"""


class PersistenceError(SmokelessError):
    """Echec de la base de donnees pendant une ecriture (transaction annulee)"""
