# app/core/security.py

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, Optional
from uuid import UUID

from jose import jwt, JWTError
from passlib.context import CryptContext
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.constants import ROL_ADMIN, ROL_CLIENTE
from app.core.database import get_db
from app.schemas.auth import TokenData
from app.models.administrador import Administrador
from app.models.cliente import Customer

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
bearer_scheme = HTTPBearer(auto_error=False)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)

def create_access_token(subject: str, role: str, email: str | None = None) -> str:
    expire = datetime.utcnow() + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode = {"sub": subject, "role": role, "exp": expire}
    if email:
        to_encode["email"] = email
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


# --------------------------------------------------------------------------- #
# CONTROL DE ACCESO AL PANEL
# --------------------------------------------------------------------------- #

@dataclass(frozen=True)
class AccessDecision:
    allowed: bool
    redirect_to: Optional[str] = None


def is_admin_email(email: Optional[str], allow_list: Iterable[str]) -> bool:
    if not email:
        return False
    permitidos = {e.strip().lower() for e in allow_list}
    return email.strip().lower() in permitidos


def evaluate_access(session_email: Optional[str], allow_list: Iterable[str], login_url: str = "/login") -> AccessDecision:
    """
    Decide si una sesión puede ver el panel de administración.
    Sin sesión, o con un correo fuera de la lista, se redirige al login.
    """
    if is_admin_email(session_email, allow_list):
        return AccessDecision(allowed=True)
    return AccessDecision(allowed=False, redirect_to=login_url)


def _login_required(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer", "Location": settings.LOGIN_URL},
    )


def decode_token(token: str) -> TokenData:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        raise _login_required("No se pudo validar las credenciales")
    user_id: str = payload.get("sub")
    role_name: str = payload.get("role")
    if user_id is None or role_name is None:
        raise _login_required("No se pudo validar las credenciales")
    return TokenData(sub=user_id, role=role_name, email=payload.get("email"))


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> TokenData:
    if credentials is None:
        raise _login_required("Inicia sesión para continuar")
    return decode_token(credentials.credentials)


def get_admin_user(
    token_data: TokenData = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> TokenData:
    """Verifica en cada petición que la sesión pertenezca a un correo autorizado
    y a una cuenta de administrador activa"""
    email = token_data.email if token_data.role == ROL_ADMIN else None
    decision = evaluate_access(email, settings.ADMIN_EMAILS, settings.LOGIN_URL)
    if decision.allowed:
        admin = _load_admin(db, token_data.sub)
        decision = evaluate_access(
            admin.email if admin and admin.activo else None,
            settings.ADMIN_EMAILS,
            settings.LOGIN_URL,
        )
    if not decision.allowed:
        logger.warning("Acceso denegado al panel para %s", token_data.email or token_data.sub)
        raise _login_required("Acceso denegado. Se requiere una cuenta de administrador")
    return token_data


def _load_admin(db: Session, subject: Optional[str]) -> Optional[Administrador]:
    try:
        admin_id = UUID(subject)
    except (TypeError, ValueError):
        return None
    return db.get(Administrador, admin_id)


def get_current_customer(
    token_data: TokenData = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Customer:
    if token_data.role != ROL_CLIENTE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Acceso denegado. Se requiere una sesión de cliente",
        )
    try:
        customer_id = UUID(token_data.sub)
    except ValueError:
        raise _login_required("No se pudo validar las credenciales")
    customer = db.get(Customer, customer_id)
    if not customer:
        raise _login_required("No hay sesión activa. Inicia sesión de nuevo, por favor.")
    return customer
