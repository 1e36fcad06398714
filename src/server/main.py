"""FastAPI application for mdtoc."""

from __future__ import annotations

from fastapi import FastAPI

from server.routers import router

app = FastAPI(title="mdtoc", description="Table of contents generator for Markdown documents")
app.include_router(router)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}
