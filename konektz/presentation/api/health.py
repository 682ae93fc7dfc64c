"""Health API Router."""

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/")
async def root():
    return {"status": "success", "message": "Welcome to Konektz API"}


@router.get("/health")
async def health():
    return {"status": "OK"}
