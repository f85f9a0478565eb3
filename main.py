from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from pathways import config
from pathways.routes import router as pathways_router

logging.basicConfig(level=config.LOG_LEVEL)
logging.info("App starting")

app = FastAPI(title="Career Pathways API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(pathways_router)


@app.get("/", tags=["meta"])
def root():
    return {"service": "career-pathways", "status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=False)
