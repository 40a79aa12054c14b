from fastapi import APIRouter

from src.codewave.api.routes import captcha, files, projects, sites, upload

api_router = APIRouter(prefix="/api")
api_router.include_router(projects.router)
api_router.include_router(files.router)

service_router = APIRouter()
service_router.include_router(upload.router)
service_router.include_router(captcha.router)

# Catch-all project paths; include last
site_router = sites.router
