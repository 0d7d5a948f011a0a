import logging

from fastapi import FastAPI, APIRouter
from fastapi.middleware.cors import CORSMiddleware

from domaintwist.api.twist_routes import router as twist_router
from domaintwist.config.settings import LOG_LEVEL

logging.basicConfig(level=LOG_LEVEL, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

# Create FastAPI application instance
app = FastAPI(title="domaintwist")

# Enable CORS middleware to allow frontend/backend communication
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allow all origins
    allow_credentials=True,
    allow_methods=["*"],  # Allow all HTTP methods
    allow_headers=["*"],  # Allow all headers
)

# Create a top-level APIRouter
router = APIRouter()

# Include the variation routes under the '/twist' path
router.include_router(twist_router, prefix="/twist")

# Include the top-level router into the main FastAPI app with a global '/api' prefix
app.include_router(router, prefix="/api")
