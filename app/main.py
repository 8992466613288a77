import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from app.core.config import settings
from app.core.database import engine, Base

from app.models.plan import MembershipPlan
from app.models.ubicacion import PickupLocation
from app.models.cliente import Customer
from app.models.renovacion import MembershipRenewal
from app.models.huacal import Huacal
from app.models.administrador import Administrador

from app.routers import auth, planes_router, clientes_router, renovaciones_router
from app.routers import ubicaciones_router, entregas_router, huacales_router
from app.routers import dashboard_router, membresia_router

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Membresías y Entregas", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS or [settings.FRONTEND_URL],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


Base.metadata.create_all(bind=engine)


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    # El mensaje del motor se devuelve tal cual, sin reintentos
    mensaje = str(exc.orig) if exc.orig is not None else str(exc)
    logger.error("Violación de restricción en %s: %s", request.url.path, mensaje)
    return JSONResponse(status_code=409, content={"detail": mensaje})


# Registrar todos los routers
app.include_router(auth.router)
app.include_router(planes_router.router)
app.include_router(clientes_router.router)
app.include_router(renovaciones_router.router)
app.include_router(ubicaciones_router.router)
app.include_router(entregas_router.router)
app.include_router(huacales_router.router)
app.include_router(dashboard_router.router)
app.include_router(membresia_router.router)

@app.get("/", summary="Health check")
async def health_check():
    return {"status": "ok"}
