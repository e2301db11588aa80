from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.schemas.validation_scheme import GenerateCodeRequest
from app.services.validation_service import (
    generate_code as svc_generate_code,
    validate_code as svc_validate_code,
)

router = APIRouter()


# Genera un código nuevo para el cliente (el cliente no encontrado va en el cuerpo, no en el status)
@router.post("/generar")
def generate_code(request: GenerateCodeRequest, db: Session = Depends(get_db)):
    return svc_generate_code(db, request.rut)

# Valida un código contra todos los códigos del cliente
@router.get("/validar")
def validate_code(
    rut: str = Query(...),
    codigo: str = Query(...),
    db: Session = Depends(get_db),
):
    return svc_validate_code(db, rut, codigo)
