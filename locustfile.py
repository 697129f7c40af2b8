import uuid

from locust import HttpUser, TaskSet, between, task


class ContactFormBehavior(TaskSet):

    @task(5)
    def submit_contact_form(self):
        visitor = uuid.uuid4().hex[:8]
        payload = {
            "name": f"Visitor {visitor}",
            "email": f"{visitor}@example.com",
            "company": "Load Test Inc.",
            "message": "Just checking in from the load test.",
        }
        self.client.post("/api/contact", json=payload)

    @task(1)
    def submit_incomplete_form(self):
        with self.client.post(
            "/api/contact", json={"name": "", "email": "", "message": ""}, catch_response=True
        ) as response:
            if response.status_code == 400:
                response.success()

    @task(1)
    def check_liveness(self):
        self.client.get("/")


class WebsiteUser(HttpUser):
    tasks = [ContactFormBehavior]
    wait_time = between(1, 2)  # Simulates the time between tasks for each user
