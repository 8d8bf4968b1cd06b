import logging
from typing import Optional

import uvicorn
from fastapi import APIRouter, Depends, FastAPI, Request, status

from shared.config import get_settings
from shared.errors import install_error_handlers
from shared.http import install_cors
from shared.logging_config import setup_logging

from .models import CreatePaymentRequest, Payment
from .service import PaymentStore

logger = logging.getLogger(__name__)

SERVICE_NAME = "payments"

router = APIRouter(prefix="/api")


def get_store(request: Request) -> PaymentStore:
    return request.app.state.store


@router.get("/payments", response_model=list[Payment], tags=["Payments"])
def list_payments(store: PaymentStore = Depends(get_store)) -> list[Payment]:
    return store.list()


@router.post("/payments", response_model=Payment, status_code=status.HTTP_201_CREATED, tags=["Payments"])
def create_payment(request: CreatePaymentRequest, store: PaymentStore = Depends(get_store)) -> Payment:
    return store.add(request.amount, request.payer_name)


def create_app(store: Optional[PaymentStore] = None) -> FastAPI:
    """Build the payments API around ``store`` (a freshly seeded one by default)."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=f"{settings.project_name} Payments API",
        description="In-memory payment records",
        version=settings.api_version,
    )
    app.state.store = store if store is not None else PaymentStore()

    install_cors(app)
    install_error_handlers(app)

    @app.get("/health", tags=["System"])
    def health_check():
        return {"status": "healthy", "service": SERVICE_NAME}

    app.include_router(router)
    return app


def main() -> None:
    settings = get_settings()
    app = create_app()
    logger.info("Payments service listening on http://%s:%d", settings.host, settings.payments_port)
    uvicorn.run(app, host=settings.host, port=settings.payments_port)


if __name__ == "__main__":
    main()
