from fastapi import APIRouter

router = APIRouter(prefix="/public", tags=["Public"])


@router.get("/health", summary="Health check", description="Public health probe endpoint.")
async def health_check():
    return {"status": "healthy"}
