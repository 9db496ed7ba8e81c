import os

from .intake_interface import IntakeInterface
from .shared import PayRecord

class IntakeDummy(IntakeInterface):
    '''
    Never opens the file. Every payslip yields the same figures.
    '''

    def __init__(
        self,
        gross_monthly: float = 2500.0,
        net_monthly: float = 1850.0,
        working_hours: float = 160.0,    # 8 hours * 20 working days
    ) -> None:
        self.gross_monthly = gross_monthly
        self.net_monthly = net_monthly
        self.working_hours = working_hours

    def extract(self, path: str) -> PayRecord:
        return PayRecord(
            gross_monthly=self.gross_monthly,
            net_monthly=self.net_monthly,
            working_hours=self.working_hours,
            source_name=os.path.basename(path),
        )
