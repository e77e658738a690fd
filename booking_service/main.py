import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from booking_service.api.bookings import router as bookings_router
from booking_service.core.config import settings
from booking_service.wiring.dependencies import reset_booking_workflow

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("booking_id", "status", "from_status", "to_status", "delay_seconds", "reason"):
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


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    reset_booking_workflow()


app = FastAPI(title="Booking Workflow", version="1.0.0", lifespan=lifespan)

app.include_router(bookings_router, tags=["bookings"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
