from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/check")
def check():
    return {"Message": "ok"}
