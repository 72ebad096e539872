import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routers.admin import router as admin_router
from routers.health import router as health_router
from routers.questions import router as questions_router
from routers.quiz import router as quiz_router

logger = logging.getLogger("wizard-web-quiz")
logging.basicConfig(level=logging.INFO)

app = FastAPI(title="Wizard Web – Challenges API")

# Allow calls from the Next.js dev server
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*", "x-admin-token"],
)


@app.get("/")
def health_root():
    return {"ok": True}


app.include_router(questions_router)  # /questions, /topics
app.include_router(quiz_router)  # /quiz/...
app.include_router(admin_router)  # /admin/...
app.include_router(health_router)  # /health/...
