"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class CardNotFoundError(DomainException):
    """No card was ever mounted at the requested list position"""

    def __init__(self, index: int):
        super().__init__(f"No card mounted at index {index}")
        self.index = index


class BrandNotFoundError(DomainException):
    """Brand grid has no entry at the requested position"""

    def __init__(self, index: int):
        super().__init__(f"No brand at index {index}")
        self.index = index


class ImageLoadError(DomainException):
    """Logo image could not be fetched or is not an image"""

    pass
