from abc import ABC, abstractmethod

from .shared import PayRecord

class IntakeInterface(ABC):
    @abstractmethod
    def extract(self, path: str) -> PayRecord:
        '''
        Reads the payslip at `path`. The media type is already checked.
        '''
        raise NotImplementedError
