"""User lookup service, deployed separately from the catalog.

Run with::

    uvicorn catalog.usuarios_main:app --port 8081
"""
from fastapi import FastAPI

from catalog.api import usuarios

app = FastAPI(
    title="Usuarios Service",
    description="Resolves a user id to a user record from a static table.",
    version="1.0.0",
)

app.include_router(usuarios.router)
