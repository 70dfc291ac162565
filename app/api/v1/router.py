from fastapi import APIRouter

from app.api.v1 import examenes, inscripciones, materias

api_router = APIRouter()

api_router.include_router(materias.router, prefix="/materias", tags=["📚 Materias"])
api_router.include_router(
    inscripciones.router, prefix="/inscripciones", tags=["📝 Inscripciones"]
)
api_router.include_router(examenes.router, prefix="/examenes", tags=["🎓 Exámenes"])
