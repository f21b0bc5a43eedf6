from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from sealnote.api import notes
from sealnote.core.exception_handlers import register_exception_handlers
from sealnote.core.logging import setup_logging

setup_logging(level=notes.settings.log_level, format_type=notes.settings.log_format)

app = FastAPI(title="Sealed Notes API")


# registered before CORS so that CORS preflights never reach it
@app.middleware("http")
async def answer_options(request: Request, call_next):
    if request.method == "OPTIONS":
        return Response(status_code=200)
    return await call_next(request)


app.add_middleware(
    CORSMiddleware,
    allow_origins=notes.settings.cors_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)
register_exception_handlers(app)
app.include_router(notes.router)


@app.get("/health")
def health():
    return {"ok": True}
