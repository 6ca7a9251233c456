#!/usr/bin/env python3
"""
Concurrent load client for the transaction service.

Times a single POST and a single GET, then runs POST/GET pairs from several
worker threads and reports how many calls succeeded.
"""

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

import httpx

from config import get_settings
from models import Driver, Transaction, Vehicle

logger = logging.getLogger(__name__)

TRANSACTIONS_PATH = "/transactions"


@dataclass
class LoadReport:
    successes: int
    errors: int
    duration: float

    @property
    def total(self) -> int:
        return self.successes + self.errors


def sample_transaction() -> Transaction:
    """The fixed record every call posts and reads back"""
    return Transaction(
        id="8834HR43F9FNF3F8J98",
        location_datetime="2024-10-20T08:38:34Z",
        location="North Highway",
        total_amount=10.5,
        currency="EUR",
        vehicle=Vehicle(vrm="1234BCD", country="ES", make="SEAT"),
        driver=Driver(
            first_name="Jose",
            last_name="Garcia",
            address_1="Apple Street",
            address_2="",
            post_code="1234",
            city="Madrid",
            region="",
            country="ES",
            phone="111-222-333",
            email="josegarcia@abc.es",
        ),
    )


def post_transaction(client: httpx.Client, transaction: Transaction) -> bool:
    try:
        response = client.post(TRANSACTIONS_PATH, json=transaction.model_dump(mode="json"))
    except httpx.HTTPError as e:
        logger.error(f"Error making POST request: {e}")
        return False

    if response.status_code == 200:
        logger.debug("Transaction posted successfully")
        return True
    logger.warning(f"Failed to post transaction: {response.status_code}")
    return False


def get_transaction(client: httpx.Client, transaction_id: str) -> bool:
    try:
        response = client.get(TRANSACTIONS_PATH, params={"id": transaction_id})
    except httpx.HTTPError as e:
        logger.error(f"Error making GET request: {e}")
        return False

    if response.status_code != 200:
        logger.warning(f"Failed to get transaction: {response.status_code}")
        return False

    try:
        transaction = Transaction.model_validate_json(response.content)
    except ValueError as e:
        logger.error(f"Error decoding response: {e}")
        return False

    logger.debug(f"Transaction retrieved successfully: {transaction!r}")
    return True


def run_load(client: httpx.Client, transaction: Transaction, calls: int, workers: int) -> LoadReport:
    """Run `calls // workers` POST/GET pairs on each of `workers` threads"""
    lock = threading.Lock()
    tally = {"successes": 0, "errors": 0}

    def record(ok: bool):
        with lock:
            tally["successes" if ok else "errors"] += 1

    def make_api_calls():
        for _ in range(calls // workers):
            record(post_transaction(client, transaction))
            record(get_transaction(client, transaction.id))

    start = time.perf_counter()
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(make_api_calls) for _ in range(workers)]
        for future in futures:
            future.result()
    duration = time.perf_counter() - start

    return LoadReport(successes=tally["successes"], errors=tally["errors"], duration=duration)


def main():
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    transaction = sample_transaction()

    with httpx.Client(base_url=settings.loadtest_base_url, timeout=10.0) as client:
        start = time.perf_counter()
        post_transaction(client, transaction)
        print(f"Single POST duration: {(time.perf_counter() - start) * 1000:.2f}ms")

        start = time.perf_counter()
        get_transaction(client, transaction.id)
        print(f"Single GET duration: {(time.perf_counter() - start) * 1000:.2f}ms")

        report = run_load(client, transaction, settings.loadtest_calls, settings.loadtest_workers)

    print(f"Total duration for concurrent calls: {report.duration:.3f}s")
    print(f"Successful executions: {report.successes}")
    print(f"Error executions: {report.errors}")


if __name__ == "__main__":
    main()
