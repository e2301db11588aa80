import os
from dotenv import load_dotenv

# Cargar variables de entorno desde .env local (útil fuera de Docker)
load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./validacion.db")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
PORT = int(os.getenv("PORT", "8080"))
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]
