from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from patternbook import __version__
from patternbook.api.routes import router
from patternbook.config import CORS_ORIGINS
from patternbook.db.session import init_db

app = FastAPI(
    title="Design Patterns Catalog",
    version=__version__,
)

# Middleware FIRST
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes AFTER middleware
app.include_router(router)


@app.on_event("startup")
def startup():
    # Never crash the app over persistence
    init_db()
