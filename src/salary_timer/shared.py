from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from textual.widget import Widget

SECONDS_PER_HOUR = 3600

ACCEPTED_MEDIA_TYPE = 'application/pdf'

class PayRecord(BaseModel):
    gross_monthly: float = Field(ge=0)
    net_monthly: float = Field(ge=0)
    working_hours: float = Field(gt=0)   # per month
    source_name: str

    model_config = ConfigDict(
        frozen=True,
    )

def ratePerSecond(record: PayRecord | None) -> float:
    '''
    Net pay earned per working second. `0.0` without a record.
    '''
    if record is None or record.working_hours <= 0:
        return 0.0
    return record.net_monthly / (record.working_hours * SECONDS_PER_HOUR)

class UnsupportedFileType(ValueError):
    def __init__(self, path: str, media_type: str | None) -> None:
        super().__init__(
            f'{path} is not a PDF (declared type: {media_type or "unknown"}).'
        )
        self.path = path
        self.media_type = media_type

def titled(
    w: Widget, /, title: str,
    style = ('round', '#7a7'), padding = (0, 1),
):
    w.styles.border = style
    w.border_title = title
    w.styles.padding = padding
    return w
