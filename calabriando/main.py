import logging

from fastapi import FastAPI

from calabriando.api.v1.bookings import router as bookings_router
from calabriando.api.v1.content import router as content_router
from calabriando.api.v1.payments import router as payments_router
from calabriando.api.v1.search import router as search_router
from calabriando.core.config import settings

CONTEXT_KEYS = ("booking_id", "kind", "item_id", "table", "attempt", "function", "status", "code", "reason", "error")


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in CONTEXT_KEYS:
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title="Calabriando Booking", version="1.0.0")

app.include_router(content_router, prefix="/api/v1", tags=["content"])
app.include_router(bookings_router, prefix="/api/v1", tags=["bookings"])
app.include_router(payments_router, prefix="/api/v1", tags=["payments"])
app.include_router(search_router, prefix="/api/v1", tags=["search"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
