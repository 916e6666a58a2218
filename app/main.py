import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.v1.catalog import router as catalog_router
from app.api.v1.quote import router as quote_router
from app.api.v1.vehicles import router as vehicles_router
from app.core.config import settings
from app.wiring.dependencies import close_quote_wizard

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("step", "service", "services", "code", "status", "reason", "opportunities"):
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
async def lifespan(_app: FastAPI):
    yield
    # Pending analysis timers must not fire after the loop shuts down.
    await close_quote_wizard()


app = FastAPI(title="Smart Quote Configurator", version="1.0.0", lifespan=lifespan)

app.include_router(quote_router, tags=["quote"])
app.include_router(vehicles_router, tags=["vehicles"])
app.include_router(catalog_router, tags=["catalog"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
