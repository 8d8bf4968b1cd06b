import logging
from typing import Optional

import uvicorn
from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, status

from shared.config import get_settings
from shared.errors import LedgerError, install_error_handlers
from shared.http import install_cors
from shared.logging_config import setup_logging

from .channels import ChannelLedgerStore
from .models import (
    CreateTransactionRequest, LedgerEntry, Transaction, TransactionType,
    TransferRequest, TransferResponse,
)
from .service import TransactionStore

logger = logging.getLogger(__name__)

SERVICE_NAME = "transactions"

transactions_router = APIRouter(prefix="/api/transactions", tags=["Transactions"])
channels_router = APIRouter(prefix="/api/channels", tags=["Channels"])


def get_store(request: Request) -> TransactionStore:
    return request.app.state.store


def get_ledger(request: Request) -> ChannelLedgerStore:
    return request.app.state.ledger


@transactions_router.get("", response_model=list[Transaction])
def list_transactions(store: TransactionStore = Depends(get_store)) -> list[Transaction]:
    return store.list()


@transactions_router.post("/send", response_model=Transaction, status_code=status.HTTP_201_CREATED)
def send(request: CreateTransactionRequest, store: TransactionStore = Depends(get_store)) -> Transaction:
    return store.add(request.amount, request.counterparty, TransactionType.SENT)


@transactions_router.post("/receive", response_model=Transaction, status_code=status.HTTP_201_CREATED)
def receive(request: CreateTransactionRequest, store: TransactionStore = Depends(get_store)) -> Transaction:
    return store.add(request.amount, request.counterparty, TransactionType.RECEIVED)


@channels_router.get("/{user}/transactions", response_model=list[LedgerEntry])
def list_user_transactions(user: str, ledger: ChannelLedgerStore = Depends(get_ledger)) -> list[LedgerEntry]:
    try:
        return ledger.list_by_user(user)
    except LedgerError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@channels_router.post("/transfer", response_model=TransferResponse, status_code=status.HTTP_201_CREATED)
def transfer(request: TransferRequest, ledger: ChannelLedgerStore = Depends(get_ledger)) -> TransferResponse:
    try:
        from_entry, to_entry = ledger.transfer(request.from_user, request.to_user, request.amount)
    except LedgerError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return TransferResponse(from_user_log=from_entry, to_user_log=to_entry)


# Must stay the last channels route.
@channels_router.get("/{path:path}", include_in_schema=False)
def malformed_channel_path(path: str):
    if path == "transfer":
        raise HTTPException(
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            detail="Method Not Allowed",
            headers={"Allow": "POST"},
        )
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="invalid path")


def create_app(
    store: Optional[TransactionStore] = None,
    ledger: Optional[ChannelLedgerStore] = None,
) -> FastAPI:
    """Build the transactions API.

    ``store`` backs ``/api/transactions`` and ``ledger`` backs
    ``/api/channels``; freshly seeded instances are used when omitted.
    """
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=f"{settings.project_name} Transactions API",
        description="In-memory transaction history and two-party channel transfers",
        version=settings.api_version,
    )
    app.state.store = store if store is not None else TransactionStore()
    app.state.ledger = ledger if ledger is not None else ChannelLedgerStore()

    install_cors(app)
    install_error_handlers(app)

    @app.get("/health", tags=["System"])
    def health_check():
        return {"status": "healthy", "service": SERVICE_NAME}

    app.include_router(transactions_router)
    app.include_router(channels_router)
    return app


def main() -> None:
    settings = get_settings()
    app = create_app()
    logger.info("Transactions service listening on http://%s:%d", settings.host, settings.transactions_port)
    uvicorn.run(app, host=settings.host, port=settings.transactions_port)


if __name__ == "__main__":
    main()
