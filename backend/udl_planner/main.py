import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, RedirectResponse

from .db import Base, engine
from .settings import settings
from .routers import inputs, suggest, plans
from .routers import export
from .routers import images
from .routers import pages
from .routers.deps import workspace_cookie
from .errors import UNEXPECTED_ERROR

logger = logging.getLogger(__name__)

app = FastAPI(title="UDL Lesson Plan Generator")
app.middleware("http")(workspace_cookie)
app.include_router(inputs.router)
app.include_router(suggest.router)
app.include_router(plans.router)
app.include_router(export.router)
app.include_router(images.router)
app.include_router(pages.router)

@app.get("/", include_in_schema=False)
async def redirect_root_to_app():
	return RedirectResponse(url="/app")

@app.get("/info")
def root():
	return {"status": "ok", "gemini_configured": bool(settings.gemini_api_key)}

@app.exception_handler(Exception)
async def unexpected_error(request: Request, exc: Exception):
	logger.exception("Unhandled error on %s %s", request.method, request.url.path)
	return JSONResponse(status_code=500, content={"detail": UNEXPECTED_ERROR})

@app.on_event("startup")
async def startup_event():
	logging.basicConfig(level=settings.log_level)
	# Initialize DB schema
	Base.metadata.create_all(bind=engine)
