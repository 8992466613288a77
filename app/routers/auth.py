# app/routers/auth.py

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.constants import ROL_ADMIN, ROL_CLIENTE
from app.core.database import get_db
from app.core.security import (
    hash_password, verify_password, create_access_token,
    get_admin_user, is_admin_email,
)
from app.models.administrador import Administrador
from app.schemas.auth import AdminCreate, AdminOut, LoginRequest, SessionOut, Token, TokenData
from app.services.clientes_service import authenticate_customer, normalize_email

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/register/administrador",
    response_model=AdminOut,
    status_code=status.HTTP_201_CREATED
)
def register_admin(
    payload: AdminCreate,
    db: Session = Depends(get_db)
):
    # Solo los correos configurados pueden tener cuenta de administrador
    if not is_admin_email(payload.email, settings.ADMIN_EMAILS):
        raise HTTPException(status_code=403, detail="Este correo no está autorizado como administrador")
    email = normalize_email(payload.email)
    if db.query(Administrador).filter_by(email=email).first():
        raise HTTPException(status_code=400, detail="El email ya está registrado")
    admin = Administrador(
        email=email,
        password_hash=hash_password(payload.password),
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    logger.info("Administrador registrado: %s", admin.email)
    return admin


@router.post("/login", response_model=Token)
def login(
    credentials: LoginRequest,
    db: Session = Depends(get_db)
):
    user = db.query(Administrador).filter_by(email=normalize_email(credentials.email)).first()
    if not user or not user.activo or not verify_password(credentials.password, user.password_hash):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Credenciales inválidas"
        )

    token = create_access_token(subject=str(user.id), role=ROL_ADMIN, email=user.email)
    return {"access_token": token, "token_type": "bearer"}


@router.post("/clientes/login", response_model=Token)
def login_cliente(
    credentials: LoginRequest,
    db: Session = Depends(get_db)
):
    customer = authenticate_customer(db, credentials.email, credentials.password)
    token = create_access_token(subject=str(customer.id), role=ROL_CLIENTE, email=customer.email)
    return {"access_token": token, "token_type": "bearer"}


@router.get("/me", response_model=SessionOut)
def get_session(token_data: TokenData = Depends(get_admin_user)):
    return SessionOut(email=token_data.email, rol=token_data.role, allowed=True)


@router.post("/logout")
def logout():
    # Los tokens no guardan estado en el servidor; el cliente descarta el suyo
    return {"message": "Sesión cerrada"}
