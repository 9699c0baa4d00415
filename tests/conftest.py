# tests/conftest.py
import os
import sys
import asyncio
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

# Momento fijo para las pruebas de fechas
NOW = datetime(2030, 1, 1, 12, 0, tzinfo=timezone.utc)


class FakeRng:
    """Sustituto de random.Random: siempre regresa el mismo valor."""
    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


# --- event loop propio por prueba (para correr corutinas) ---
@pytest.fixture(autouse=True)
def event_loop_per_test():
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        yield loop
    finally:
        loop.close()
        asyncio.set_event_loop(None)


@pytest.fixture()
def run(event_loop_per_test):
    def _run(coro):
        return event_loop_per_test.run_until_complete(coro)
    return _run


# ---------- Sin retardos simulados y catálogo limpio en cada prueba ----------
@pytest.fixture(autouse=True)
def no_delays(monkeypatch):
    monkeypatch.setattr("app.config.VENDOR_DELAY_SECONDS", 0.0, raising=True)
    monkeypatch.setattr("app.config.NEGOTIATION_DELAY_SECONDS", 0.0, raising=True)
    monkeypatch.setattr("app.config.BOOKING_DELAY_SECONDS", 0.0, raising=True)
    yield


@pytest.fixture(autouse=True)
def seed_catalog(monkeypatch):
    import app.rental.catalog as catmod
    monkeypatch.setattr("app.config.RENTAL_CATALOG_PATH", "", raising=True)
    catmod.reset_catalog()
    yield
    catmod.reset_catalog()


@pytest.fixture()
def catalog():
    from app.rental.catalog import load_catalog
    return load_catalog("")


@pytest.fixture()
def now():
    return NOW


@pytest.fixture()
def future_dates():
    """(start, end) en YYYY-MM-DD, empezando `offset` días después de hoy (UTC)."""
    def _dates(days: int, offset: int = 5):
        start = datetime.now(timezone.utc).date() + timedelta(days=offset)
        end = start + timedelta(days=days)
        return start.isoformat(), end.isoformat()
    return _dates


@pytest.fixture()
def fake_rng():
    return FakeRng


# ---------- TestClient de FastAPI ----------
@pytest.fixture()
def client():
    from app.main import app
    return TestClient(app)
