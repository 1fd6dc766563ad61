# intake_form/main.py
import contextlib

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from intake_form import __version__
from intake_form.config import get_settings
from intake_form.log import configure_logging
from intake_form.services import init_db
from intake_form.api.routes import router as api_router


settings = get_settings()
configure_logging(settings.log_level)


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


app = FastAPI(title="Client Intake Form API", version=__version__, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=True,
)


@app.get("/")
def root():
    return {"message": "Client Intake Form API is running"}


app.include_router(api_router, prefix="/api")


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
