import logging
import mimetypes

from .intake_interface import IntakeInterface
from .shared import ACCEPTED_MEDIA_TYPE, PayRecord, UnsupportedFileType

log = logging.getLogger(__name__)

def declaredMediaType(path: str) -> str | None:
    media_type, _ = mimetypes.guess_type(path, strict=False)
    return media_type

def intakeFile(
    intake: IntakeInterface, path: str,
    accepted: str = ACCEPTED_MEDIA_TYPE,
) -> PayRecord:
    media_type = declaredMediaType(path)
    if media_type != accepted:
        log.warning('rejected %s (%s)', path, media_type)
        raise UnsupportedFileType(path, media_type)
    return intake.extract(path)

def acceptedExtensions(accepted: str = ACCEPTED_MEDIA_TYPE) -> tuple[str, ...]:
    return tuple(mimetypes.guess_all_extensions(accepted, strict=False))
