from contextlib import asynccontextmanager
from typing import Optional
import logging

import uvicorn
from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.requests import ClientDisconnect

from config import get_settings
from models import StatusResponse, Transaction
from store import TransactionNotFound, TransactionStore

settings = get_settings()

# Configure logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan manager for FastAPI app"""
    logger.info("Starting Transaction Service")
    yield
    logger.info(f"Shutting down Transaction Service ({len(app.state.store)} transactions in memory)")


def get_store(request: Request) -> TransactionStore:
    return request.app.state.store


async def create_transaction(request: Request):
    """Store the transaction in the body, overwriting any with the same id"""
    try:
        try:
            body = await request.body()
        except ClientDisconnect as e:
            logger.warning("create_transaction - Error reading body")
            raise HTTPException(status_code=400, detail=f"Error reading body: {e!r}")

        try:
            transaction = Transaction.model_validate_json(body)
        except ValidationError as e:
            logger.warning("create_transaction - Error decoding body")
            raise HTTPException(status_code=400, detail=str(e))

        get_store(request).put(transaction)
        logger.debug(f"Transaction {transaction.id} stored")

        return StatusResponse(status="Success")

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to store transaction: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to store transaction: {str(e)}")


async def read_transaction(request: Request, id: Optional[str] = Query(None)):
    """Return the full transaction stored under `id`"""
    try:
        if not id:
            raise HTTPException(status_code=400, detail="param id is missing")

        try:
            transaction = get_store(request).get(id)
        except TransactionNotFound:
            # Kept as 400 rather than 404 so existing clients see the same status
            raise HTTPException(status_code=400, detail="id not found")

        # JSONResponse renders here, so non-compliant values fail inside this block
        response = JSONResponse(content=transaction.model_dump(mode="json"))
        logger.debug(f"Transaction {id} retrieved")
        return response

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to serialize transaction {id}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to serialize transaction: {str(e)}")


def create_app(store: Optional[TransactionStore] = None) -> FastAPI:
    """Build the service around `store`, or around a new empty store"""
    app = FastAPI(
        title="Transaction Service",
        description="In-memory store for vehicle, driver and payment transactions",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else TransactionStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_api_route(
        "/transactions",
        create_transaction,
        methods=["POST"],
        response_model=StatusResponse,
        status_code=200,
    )
    app.add_api_route(
        "/transactions",
        read_transaction,
        methods=["GET"],
        response_model=Transaction,
    )
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        access_log=True
    )
