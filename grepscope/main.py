"""grepscope — FastAPI backend."""

import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import settings
from .routers import context, languages

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
    stream=sys.stdout,
)

app = FastAPI(
    title="grepscope",
    description="Grep source files and show matches inside their enclosing scopes",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(context.router)
app.include_router(languages.router)


@app.get("/")
async def root():
    return {"service": "grepscope", "version": __version__, "status": "running"}
