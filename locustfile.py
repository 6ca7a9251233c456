from locust import HttpUser, task, between

from loadtest import sample_transaction

TRANSACTION = sample_transaction().model_dump(mode="json")


class TransactionUser(HttpUser):
    wait_time = between(1, 3)  # seconds

    @task
    def post_then_get_transaction(self):
        self.client.post("/transactions", json=TRANSACTION)
        self.client.get("/transactions", params={"id": TRANSACTION["id"]}, name="/transactions?id=[id]")
