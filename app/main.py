import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.api import validation_routes
from app.core.config import CORS_ORIGINS, LOG_LEVEL, PORT
from app.db.migrations.create_tables import create_tables
from app.db.session import engine

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    La conexión a la base se abre al iniciar el servicio y se libera al detenerlo.
    """
    create_tables(engine)
    logger.info("Servicio de validación iniciado.")
    yield
    engine.dispose()
    logger.info("Conexiones a la base de datos liberadas.")


app = FastAPI(title="Customer validation service", lifespan=lifespan)
app.include_router(validation_routes.router, prefix="/validacion", tags=["validacion"])

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
def root():
    return {"message": "Servicio de validación de clientes activo"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=PORT)
