from src.codewave.services.captcha_service import CaptchaService
from src.codewave.services.project_service import ProjectService
from src.codewave.services.site_service import SiteService
from src.codewave.services.upload_service import IncomingFile, UploadService

__all__ = ["CaptchaService", "IncomingFile", "ProjectService", "SiteService", "UploadService"]
