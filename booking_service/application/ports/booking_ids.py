from abc import ABC, abstractmethod


class BookingIdGeneratorPort(ABC):
    @abstractmethod
    def new_id(self) -> str:
        """Return an identifier not handed out before by this generator."""
        raise NotImplementedError
