"""
Exceptions du domaine
"""


class DomainError(ValueError):
    """Erreur métier de base"""


class NotFoundError(DomainError):
    """Aucune ligne ne correspond à l'identifiant demandé"""


class DuplicateKeyError(DomainError):
    """Le nom d'utilisateur existe déjà"""


class InvalidReferenceError(DomainError):
    """Un message référence un utilisateur inexistant"""


class UnauthorizedError(DomainError):
    """L'utilisateur courant n'est ni l'expéditeur ni le destinataire requis"""
