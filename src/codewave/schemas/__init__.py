from src.codewave.schemas.captcha import CaptchaRequest, CaptchaResult
from src.codewave.schemas.project import (
    FileContent,
    FileSummary,
    MessageResponse,
    ProjectRecord,
    StoredFile,
    UploadSummary,
)

__all__ = [
    "CaptchaRequest",
    "CaptchaResult",
    "FileContent",
    "FileSummary",
    "MessageResponse",
    "ProjectRecord",
    "StoredFile",
    "UploadSummary",
]
