from locust import HttpUser, task, between
import os
import json
import time


class MarketplaceUser(HttpUser):
    """Locust user that authenticates via JWT before running tasks."""

    abstract = True
    wait_time = between(0.5, 2.5)
    role = "advertiser"

    def on_start(self):
        self.token = None
        self.headers = {"Content-Type": "application/json"}

        # Prefer login if credentials are provided; otherwise register a unique user
        email = os.getenv(f"LOCUST_{self.role.upper()}_EMAIL")
        password = os.getenv("LOCUST_PASSWORD", "testpass123")

        if email:
            login_payload = json.dumps({"email": email, "password": password})
            with self.client.post(
                "/api/v1/auth/login/",
                data=login_payload,
                headers=self.headers,
                catch_response=True,
            ) as resp:
                if resp.status_code == 200 and self._use_token(resp):
                    resp.success()
                    return

        ts = int(time.time() * 1000)
        reg_payload = json.dumps({
            "email": f"locust-{self.role}-{ts}@test.com",
            "password": password,
            "role": self.role,
            "business_name": f"Locust {self.role} {ts}",
        })
        with self.client.post(
            "/api/v1/auth/register/",
            data=reg_payload,
            headers=self.headers,
            catch_response=True,
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Register failed: {resp.status_code}")
            elif self._use_token(resp):
                resp.success()
            else:
                resp.failure("No access token in register response")

    def _use_token(self, resp):
        token = resp.json().get("access")
        if token:
            self.token = token
            self.headers["Authorization"] = f"Bearer {self.token}"
        return bool(token)

    @task(2)
    def analytics_summary(self):
        self.client.get("/api/v1/analytics/summary/?range=30d", headers=self.headers)

    @task(1)
    def booking_partitions(self):
        self.client.get("/api/v1/bookings/partitions/", headers=self.headers)


class AdvertiserUser(MarketplaceUser):
    role = "advertiser"
    weight = 3

    @task(4)
    def discover_screens(self):
        self.client.get("/api/v1/discover/screens/", headers=self.headers)

    @task(2)
    def search_screens(self):
        self.client.get("/api/v1/discover/screens/?search=downtown", headers=self.headers)

    @task(3)
    def list_campaigns(self):
        self.client.get("/api/v1/campaigns/", headers=self.headers)

    @task(1)
    def campaign_summary(self):
        self.client.get("/api/v1/campaigns/summary/", headers=self.headers)


class ScreenOwnerUser(MarketplaceUser):
    role = "screen_owner"
    weight = 1

    @task(3)
    def list_screens(self):
        self.client.get("/api/v1/screens/", headers=self.headers)

    @task(2)
    def screen_content(self):
        self.client.get("/api/v1/screens/content/", headers=self.headers)


# Useful for headless CSV output: `locust --headless -u 50 -r 5 -t 2m -f locustfile.py --csv out --host http://localhost:8070`
