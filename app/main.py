from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import register_error_handlers
from app.api.routes import auth, pricing
from app.api.routes.admin_panel import router as admin_panel_router

# ⭐ Import logging system
from app.core.logging_config import get_logger

logger = get_logger()

app = FastAPI(
    title="Hall Booking API",
    version="1.0.0",
    description="API for Hall Owner Pricing, User Sign-Up & Admin User Management"
)

register_error_handlers(app)


# ⭐ Request Logging Middleware
@app.middleware("http")
async def log_requests(request, call_next):
    logger.info(f"REQUEST: {request.method} {request.url}")

    try:
        response = await call_next(request)
        logger.info(f"RESPONSE: {response.status_code} {request.url}")
        return response

    except Exception as e:
        logger.error(f"ERROR: {request.url} -> {str(e)}")
        raise e


# ⭐ CORS (important for frontend)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],   # Can restrict later for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(pricing.router)
app.include_router(admin_panel_router)


@app.get("/", tags=["Root"])
def root():
    return {"message": "Backend running successfully"}
