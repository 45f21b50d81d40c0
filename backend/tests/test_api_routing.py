"""
MiniCRM Backend — Routing, CORS & Error Envelope Tests
========================================================

What:  Behavior shared by every endpoint: preflight handling, CORS headers,
       not-found fall-through, and the 500 shape for unreadable bodies.
"""

import logging

import pytest

CORS_HEADERS = {
    "access-control-allow-origin": "*",
    "access-control-allow-methods": "GET, POST, PUT, DELETE, OPTIONS",
    "access-control-allow-headers": "Content-Type",
}


def assert_cors(response):
    for name, value in CORS_HEADERS.items():
        assert response.headers.get(name) == value


class TestPreflight:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/api/companies", "/api/contacts/5", "/nowhere/at/all"])
    async def test_options_any_path(self, test_client, path):
        response = await test_client.options(path)

        assert response.status_code == 200
        assert response.content == b""
        assert_cors(response)


class TestCorsOnResponses:

    @pytest.mark.asyncio
    async def test_success_response(self, test_client):
        response = await test_client.get("/api/companies")

        assert response.headers["content-type"].startswith("application/json")
        assert_cors(response)

    @pytest.mark.asyncio
    async def test_not_found_response(self, test_client):
        assert_cors(await test_client.get("/api/companies/12345"))

    @pytest.mark.asyncio
    async def test_server_error_response(self, test_client):
        assert_cors(await test_client.post("/api/companies", json={}))


class TestNotFoundFallThrough:

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method,path",
        [
            ("GET", "/"),
            ("GET", "/api/unknown"),
            ("GET", "/api/companies/abc"),
            ("GET", "/api/companies/-1"),
            ("GET", "/api/companies/"),
            ("GET", "/api/deals/1"),
            ("DELETE", "/api/deals/1"),
            ("PUT", "/api/companies"),
            ("POST", "/api/companies/1"),
            ("GET", "/api/activities"),
            ("GET", "/docs"),
        ],
    )
    async def test_unmatched_route(self, test_client, method, path):
        response = await test_client.request(method, path)

        assert response.status_code == 404
        assert response.json() == {"error": "Not found"}


class TestUnreadableBodies:

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method,path",
        [
            ("POST", "/api/companies"),
            ("PUT", "/api/companies/1"),
            ("POST", "/api/contacts"),
            ("PUT", "/api/contacts/1"),
            ("POST", "/api/activities"),
            ("POST", "/api/deals"),
            ("PUT", "/api/deals/1"),
        ],
    )
    async def test_malformed_json_is_500(self, test_client, method, path):
        response = await test_client.request(
            method,
            path,
            content="{not valid json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 500
        assert response.json()["error"]

    @pytest.mark.asyncio
    async def test_non_object_body_is_500(self, test_client):
        response = await test_client.post("/api/companies", json=["Acme"])

        assert response.status_code == 500
        assert "error" in response.json()


class TestRequestId:

    @pytest.mark.asyncio
    async def test_generated(self, test_client):
        response = await test_client.get("/api/dashboard")

        assert len(response.headers["x-request-id"]) == 8

    @pytest.mark.asyncio
    async def test_echoed(self, test_client):
        response = await test_client.get("/api/dashboard", headers={"X-Request-ID": "trace-123"})

        assert response.headers["x-request-id"] == "trace-123"


class TestAccessLog:

    @staticmethod
    def _access_records(caplog):
        return [r for r in caplog.records if r.name == "minicrm.access"]

    @pytest.mark.asyncio
    async def test_logs_route_template(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="minicrm.access")

        await test_client.get("/api/companies/42", headers={"X-Request-ID": "abc123"})

        record = self._access_records(caplog)[-1]
        assert record.route == "/api/companies/{company_id:int}"
        assert record.status == 404
        assert record.request_id == "abc123"
        assert "/api/companies/42" not in record.getMessage()

    @pytest.mark.asyncio
    async def test_unmatched_path_logged_raw(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="minicrm.access")

        await test_client.get("/api/unknown")

        record = self._access_records(caplog)[-1]
        assert record.route is None
        assert "/api/unknown" in record.getMessage()
        assert record.levelno == logging.WARNING

    @pytest.mark.asyncio
    async def test_server_error_logged_at_error(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="minicrm.access")

        await test_client.post("/api/companies", json={})

        record = self._access_records(caplog)[-1]
        assert record.route == "/api/companies"
        assert record.levelno == logging.ERROR


class TestCompression:

    @pytest.mark.asyncio
    async def test_small_error_body_not_compressed(self, test_client):
        response = await test_client.post("/api/companies", json={})

        assert response.status_code == 500
        assert "content-encoding" not in response.headers
        assert_cors(response)

    @pytest.mark.asyncio
    async def test_small_not_found_body_not_compressed(self, test_client):
        response = await test_client.get("/api/nowhere")

        assert "content-encoding" not in response.headers

    @pytest.mark.asyncio
    async def test_large_list_compressed(self, test_client):
        for i in range(10):
            await test_client.post(
                "/api/companies",
                json={
                    "name": f"Company number {i} with a long enough name",
                    "website": f"https://company-{i}.example",
                    "industry": "Wholesale distribution",
                },
            )

        response = await test_client.get("/api/companies")

        assert response.headers["content-encoding"] == "gzip"
        assert len(response.json()) == 10
        assert_cors(response)


class TestIdsBeyondKeyRange:
    """Digit-only ids too large for an INTEGER key name no row."""

    HUGE = "99999999999999999999999"

    @pytest.mark.asyncio
    async def test_get_company(self, test_client):
        response = await test_client.get(f"/api/companies/{self.HUGE}")

        assert response.status_code == 404
        assert response.json() == {"error": "Company not found"}

    @pytest.mark.asyncio
    async def test_get_contact(self, test_client):
        response = await test_client.get(f"/api/contacts/{self.HUGE}")

        assert response.status_code == 404
        assert response.json() == {"error": "Contact not found"}

    @pytest.mark.asyncio
    async def test_contact_activities(self, test_client):
        response = await test_client.get(f"/api/contacts/{self.HUGE}/activities")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method,path,body,message",
        [
            ("PUT", "/api/companies/{id}", {"name": "X"}, "Company updated successfully"),
            ("DELETE", "/api/companies/{id}", None, "Company deleted successfully"),
            ("PUT", "/api/contacts/{id}", {"first_name": "X"}, "Contact updated successfully"),
            ("DELETE", "/api/contacts/{id}", None, "Contact deleted successfully"),
            ("PUT", "/api/deals/{id}", {"title": "X"}, "Deal updated successfully"),
        ],
    )
    async def test_writes_touch_nothing(self, test_client, method, path, body, message):
        existing = (await test_client.post("/api/companies", json={"name": "Acme"})).json()

        response = await test_client.request(
            method, path.format(id=self.HUGE), json=body
        )

        assert response.status_code == 200
        assert response.json() == {"message": message}
        assert (await test_client.get(f"/api/companies/{existing['id']}")).status_code == 200
