from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from exam_results.utils.env import load_environment
from exam_results.api.routes import router as api_router
from exam_results.startup import lifespan

# Initialize environment variables
load_environment()

app = FastAPI(
    title="Exam Results Extractor",
    description="Extracts laboratory exam results from free-form text as an abbreviated, pipe-delimited summary",
    version="1.0.0",
    docs_url="/docs",  # Swagger UI
    redoc_url="/redoc",  # ReDoc UI
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, replace with specific origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("exam_results.main:app", host="0.0.0.0", port=8000, reload=True)
