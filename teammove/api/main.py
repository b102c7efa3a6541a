"""
FastAPI app for the TeamMove backend.

HTTP layer over the application use cases. Run with:
    uvicorn teammove.api.main:app --reload
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from teammove.api.router import router
from teammove.application.config import CORS_ORIGINS
from teammove.application.logging_config import configure_logging

configure_logging()

app = FastAPI(
    title="TeamMove API",
    description="Events and carpool coordination",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
def root():
    """Health"""
    return {"message": "TeamMove API", "status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
