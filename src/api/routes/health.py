"""Liveness endpoint."""

from litestar import MediaType, get


@get("/health", media_type=MediaType.TEXT)
async def health() -> str:
    return "ok"
