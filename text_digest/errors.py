from __future__ import annotations


class DigestError(ValueError):
    """Base class for every error the digest pipeline reports to a user."""


class EmptyDocumentError(DigestError):
    def __init__(self, message: str = "Aucun contenu exploitable trouvé dans ce PDF."):
        super().__init__(message)


class FileTooLargeError(DigestError):
    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(
            f"Le fichier dépasse la taille maximale autorisée de {limit // (1024 * 1024)} Mo."
        )


class UnsupportedFileTypeError(DigestError):
    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(f"Format de fichier non pris en charge: .{extension}")


class ExtractionError(DigestError):
    pass


class InsufficientTextError(DigestError):
    def __init__(self, length: int, minimum: int):
        self.length = length
        self.minimum = minimum
        super().__init__(
            "Le document ne contient pas assez de texte pour une synthèse pertinente."
        )
