"""
VitalNexus Health Backend - FastAPI Application

Main application entry point with API endpoints for:
- Doctor directory management
- User registration and profile updates
- Health articles
- Simulated smartwatch telemetry
- Specialist consultation (prediction → recommended doctors)
"""
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any, Dict, List, Optional
import threading
import uuid

from fastapi import Body, Depends, FastAPI, Query, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from vitalnexus.config import settings
from vitalnexus.core.recommendation import PredictionRecord, RecommendationEngine
from vitalnexus.db import (
    ArticleRepository,
    DoctorRepository,
    SqlDepartmentDirectory,
    UserRepository,
    get_db,
    init_db,
)
from vitalnexus.models import (
    ArticleOut,
    DoctorIn,
    DoctorOut,
    HealthResponse,
    MessageResponse,
    PredictionPayload,
    RecommendationResponse,
    SpecialtyInfo,
    UserOut,
    UserProfileUpdate,
    UserRegister,
)
from vitalnexus.services import ConsultationStore, WearableSimulator
from vitalnexus.utils import VitalNexusError, get_logger, setup_logging

setup_logging(settings.log_level, settings.log_file)
logger = get_logger(__name__)

SESSION_HEADER = "X-Session-ID"


# ---- Shared collaborators ----

_engine = RecommendationEngine()
_simulator = WearableSimulator()
_consultation_store: Optional[ConsultationStore] = None
_consultation_store_lock = threading.Lock()


def get_recommendation_engine() -> RecommendationEngine:
    return _engine


def get_wearable_simulator() -> WearableSimulator:
    return _simulator


def get_consultation_store() -> ConsultationStore:
    """Consultation store, opened once on first use."""
    global _consultation_store
    if _consultation_store is None:
        with _consultation_store_lock:
            if _consultation_store is None:
                _consultation_store = ConsultationStore()
    return _consultation_store


# ---- Application Lifespan ----

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and open the consultation store; close it on shutdown."""
    init_db()
    get_consultation_store()
    logger.info(f"{settings.app_name} ready ({settings.environment})")
    yield

    global _consultation_store
    if _consultation_store is not None:
        _consultation_store.close()
        _consultation_store = None
    logger.info(f"{settings.app_name} shut down.")


# ---- FastAPI Application ----

app = FastAPI(
    title=settings.app_name,
    description="Doctor directory, wearable telemetry and specialist recommendations",
    version=settings.version,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[SESSION_HEADER],
)

START_TIME = datetime.now()


@app.exception_handler(VitalNexusError)
async def vitalnexus_error_handler(request: Request, exc: VitalNexusError):
    """Report backend errors as {"error", "message", "details"}."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


# ---- Health ----

def _health() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=settings.version,
        timestamp=datetime.now().isoformat(),
        uptime_seconds=(datetime.now() - START_TIME).total_seconds(),
    )


@app.get("/", response_model=HealthResponse, tags=["Health"])
async def root():
    """API root - health check."""
    return _health()


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return _health()


# ---- Doctors ----

@app.get("/doctors", response_model=List[DoctorOut], tags=["Doctors"])
def list_doctors(db: Session = Depends(get_db)):
    return DoctorRepository(db).list_all()


@app.post("/doctors", response_model=DoctorOut, status_code=201, tags=["Doctors"])
def create_doctor(payload: DoctorIn, db: Session = Depends(get_db)):
    return DoctorRepository(db).create(payload.name, payload.email, payload.department)


@app.put("/doctors/{doctor_id}", response_model=DoctorOut, tags=["Doctors"])
def update_doctor(doctor_id: int, payload: DoctorIn, db: Session = Depends(get_db)):
    return DoctorRepository(db).update(doctor_id, payload.name, payload.email, payload.department)


@app.delete("/doctors/{doctor_id}", response_model=MessageResponse, tags=["Doctors"])
def delete_doctor(doctor_id: int, db: Session = Depends(get_db)):
    DoctorRepository(db).delete(doctor_id)
    return MessageResponse(message="Doctor deleted successfully")


# ---- Articles ----

@app.get("/articles", response_model=List[ArticleOut], tags=["Articles"])
def list_articles(db: Session = Depends(get_db)):
    """All articles, newest first."""
    return ArticleRepository(db).list_latest()


# ---- Telemetry ----

@app.get("/smartwatch-data", tags=["Telemetry"])
async def smartwatch_data(simulator: WearableSimulator = Depends(get_wearable_simulator)):
    """One simulated smartwatch reading."""
    return simulator.read().to_dict()


# ---- Consultation ----

@app.post("/consultation", tags=["Consultation"])
def create_consultation(
    response: Response,
    payload: Optional[PredictionPayload] = Body(None),
    session_id: Optional[str] = Query(None, description="Key for later retrieval; generated if omitted"),
    db: Session = Depends(get_db),
    engine: RecommendationEngine = Depends(get_recommendation_engine),
    store: ConsultationStore = Depends(get_consultation_store),
) -> List[Dict[str, Any]]:
    """
    Recommend doctors for a health prediction.

    Returns the doctors whose department matches one of the recommended
    specialties (empty when nothing matched or no body was sent). The
    result is also stored under the session id echoed in the X-Session-ID
    header.
    """
    session_id = session_id or str(uuid.uuid4())
    record = payload.to_record() if payload is not None else PredictionRecord()
    result = engine.consult(record, SqlDepartmentDirectory(db))

    store.save(session_id, result.doctors)
    response.headers[SESSION_HEADER] = session_id

    logger.info(
        f"Consultation {session_id}: specialties="
        f"{sorted(s.value for s in result.specialties)}, doctors={len(result.doctors)}"
    )
    return result.doctors


@app.get("/consultation", tags=["Consultation"])
def get_consultation(
    session_id: str = Query(..., description="Session id returned by POST /consultation"),
    store: ConsultationStore = Depends(get_consultation_store),
) -> List[Dict[str, Any]]:
    """Most recent consultation result for a session."""
    return store.get(session_id)


@app.post("/consultation/recommendation", response_model=RecommendationResponse, tags=["Consultation"])
async def preview_recommendation(
    payload: PredictionPayload,
    engine: RecommendationEngine = Depends(get_recommendation_engine),
):
    """Specialties and departments for a prediction, without a directory lookup."""
    record = payload.to_record()
    specialties = engine.recommend(record)
    return RecommendationResponse(
        conditions=engine.extract_conditions(record),
        specialties=sorted(s.value for s in specialties),
        departments=sorted(engine.resolve_departments(specialties)),
    )


@app.get("/specialties", response_model=List[SpecialtyInfo], tags=["Reference"])
async def list_specialties(engine: RecommendationEngine = Depends(get_recommendation_engine)):
    """Rule catalog: each specialty with its department and keywords."""
    return engine.describe_catalog()


# ---- Users ----

@app.post("/register", response_model=UserOut, status_code=201, tags=["Users"])
def register_user(payload: UserRegister, db: Session = Depends(get_db)):
    return UserRepository(db).register(payload.username, payload.email, payload.password)


@app.put("/users/{user_id}", response_model=UserOut, tags=["Users"])
def update_user(user_id: int, payload: UserProfileUpdate, db: Session = Depends(get_db)):
    return UserRepository(db).update_profile(user_id, payload.gender, payload.age, payload.bmi)


# ---- Run with uvicorn ----
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
