from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
import logging
from contextlib import asynccontextmanager

from models import AnalyzeRequest, AnalyzeResponse
from services.document_service import DocumentService
from config import Config

# Initialize configuration
config = Config()

# Configure logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Initialize document service
document_service = None

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    global document_service
    logger.info("Initializing HackRx query dispatcher")
    document_service = DocumentService(config)
    logger.info(f"Query API endpoint: {document_service.run_url}")
    
    yield
    
    # Shutdown
    logger.info("Shutting down application")

# Create FastAPI app with lifespan management
app = FastAPI(
    title="HackRx Document Query Dispatcher",
    description="Forwards document questions to the HackRx query API, with offline demo answers",
    version="1.0.0",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/")
async def root():
    """Health check endpoint"""
    return {
        "message": "HackRx Document Query Dispatcher is running",
        "status": "healthy",
        "version": "1.0.0"
    }

@app.get("/health")
async def health_check():
    """Detailed health check"""
    return {
        "status": "healthy",
        "services": {
            "document_service": document_service is not None,
            "api_base_url": config.API_BASE_URL,
            "timeout_ms": config.TIMEOUT_MS,
        }
    }

@app.post("/api/v1/query", response_model=AnalyzeResponse)
async def run_queries(request: AnalyzeRequest):
    """
    Answer a batch of questions about a document

    Blank questions are dropped. Answers come from the remote query API, or from
    demo responses when it is unavailable; `degraded` tells the two apart.
    """
    if not document_service:
        raise HTTPException(
            status_code=500,
            detail="Document service not initialized"
        )
    
    questions = [q for q in request.questions if q.strip()]
    if not questions:
        raise HTTPException(
            status_code=400,
            detail="At least one question is required"
        )
    
    logger.info(f"Received query request with {len(questions)} questions")
    report = await document_service.dispatch(questions, request.documents or None)
    
    if report.degraded:
        logger.warning(f"Served demo responses ({report.failure})")
    
    return AnalyzeResponse(**report.model_dump())
