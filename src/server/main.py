"""FastAPI application."""

from __future__ import annotations

from fastapi import FastAPI

from server.routers import documents

app = FastAPI(
    title="charter2pdf",
    description="Pagination, numbering and rendering for constitution-style documents.",
)
app.include_router(documents.router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}
