"""
Fixed-status endpoints
"""
from fastapi import APIRouter, Response


router = APIRouter(tags=["status"])


@router.get("/unauthorized")
async def unauthorized():
    return Response(status_code=401)


@router.get("/not-found")
async def not_found():
    return Response(status_code=404)
