from typing import Annotated, Optional

import pytest
from fastapi import Depends, FastAPI, Request
from fastapi.testclient import TestClient
from pydantic import BaseModel

from medrec_commons.api.deps import get_database_check, require_roles
from medrec_commons.app import create_app
from medrec_commons.core import exceptions
from medrec_commons.core.config import Config, TwilioProperties
from medrec_commons.core.validation import allowed_values
from medrec_commons.dto import PatientMetaRequest


class ImagingOrder(BaseModel):
    priority: Annotated[Optional[str], allowed_values("imaging_priority")] = None
    order_status: Annotated[Optional[str], allowed_values("order_status")] = None


ERRORS = {
    "not-found": exceptions.ResourceNotFoundException,
    "unauthorized": exceptions.UnauthorizedAccessException,
    "forbidden": exceptions.InsufficientRoleException,
    "improper": exceptions.ImproperRequestException,
    "validation": exceptions.ValidationException,
    "conflict": exceptions.EmailAlreadyExistsException,
    "creation": exceptions.ResourceCreationException,
}


@pytest.fixture
def config() -> Config:
    return Config(
        ENVIRONMENT="test",
        CORS_ALLOWED_ORIGINS_ENV="http://localhost:3000",
        SUPABASE_URL="https://example.supabase.co",
        SUPABASE_SERVICE_KEY="service-key",
        twilio=TwilioProperties(account_sid="AC123", auth_token="token", phone_number="+15550000000"),
    )


def _mount_test_routes(app: FastAPI) -> None:
    @app.get("/raise/{kind}")
    async def raise_error(kind: str):
        raise ERRORS[kind](f"{kind} happened")

    @app.get("/boom")
    async def boom():
        raise RuntimeError("unexpected")

    @app.post("/patient-meta")
    async def patient_meta(body: PatientMetaRequest):
        return body.model_dump(by_alias=True, exclude_none=True)

    @app.post("/imaging-orders")
    async def imaging_orders(body: ImagingOrder):
        return body.model_dump()

    @app.get("/admin-only", dependencies=[Depends(require_roles("admin"))])
    async def admin_only():
        return {"ok": True}

    @app.middleware("http")
    async def attach_roles(request: Request, call_next):
        header = request.headers.get("x-roles")
        if header is not None:
            request.state.roles = [r for r in header.split(",") if r]
        return await call_next(request)


@pytest.fixture
def make_app():
    def _make(config: Config) -> FastAPI:
        application = create_app(config)
        _mount_test_routes(application)
        application.dependency_overrides[get_database_check] = lambda: (lambda cfg: None)
        return application

    return _make


@pytest.fixture
def app(config: Config, make_app) -> FastAPI:
    return make_app(config)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)
