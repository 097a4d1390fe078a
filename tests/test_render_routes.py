"""Tests for the lazy renderable endpoint."""

from __future__ import annotations

import json
import unittest

from fastapi.testclient import TestClient

from adminkit.config import AdminSettings
from adminkit.context import set_admin_context
from adminkit.form import SelectTableField
from adminkit.renderable import TableRenderable, registry
from adminkit.server import create_app
from tests.unittest_support import UserTable


class RenderRouteTestCase(unittest.TestCase):
    def setUp(self):
        self.app = create_app(AdminSettings(route_prefix="backend", log_level="ERROR"))
        self.client = TestClient(self.app)

    def tearDown(self):
        set_admin_context(None)

    def test_health(self):
        response = self.client.get("/health")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "ok"})

    def test_render_registered_table_with_row_selector(self):
        response = self.client.get(
            "/backend/api/render",
            params={"renderable": "tests.users", "payload": json.dumps({"_row_": ["id", "email"]})},
        )

        self.assertEqual(response.status_code, 200)
        self.assertIn("text/html", response.headers["content-type"])
        self.assertIn('data-id="2" data-label="grace@example.com"', response.text)
        self.assertIn("X-Request-ID", response.headers)

    def test_field_dialog_url_round_trips(self):
        field = SelectTableField("user_id").from_(UserTable()).pluck("name")
        field.render()
        url = field.dialog.get_table().get_renderable().get_url()

        response = self.client.get(url)

        self.assertEqual(response.status_code, 200)
        self.assertIn('data-id="3" data-label="Linus"', response.text)

    def test_unknown_renderable_returns_404(self):
        response = self.client.get("/backend/api/render", params={"renderable": "nope"})

        self.assertEqual(response.status_code, 404)
        body = response.json()
        self.assertEqual(body["error"], "renderable_not_found")
        self.assertEqual(body["details"], {"renderable": "nope"})
        self.assertIn("request_id", body)

    def test_invalid_payload_returns_400(self):
        response = self.client.get("/backend/api/render", params={"renderable": "tests.users", "payload": "{oops"})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"], "invalid_payload")

    def test_non_object_payload_returns_400(self):
        response = self.client.get("/backend/api/render", params={"renderable": "tests.users", "payload": "[1]"})

        self.assertEqual(response.status_code, 400)

    def test_malformed_row_selector_returns_400(self):
        for selector in (["id"], "x", 5, ["id", "name", "email"], [1, 2]):
            with self.subTest(selector=selector):
                response = self.client.get(
                    "/backend/api/render",
                    params={"renderable": "tests.users", "payload": json.dumps({"_row_": selector})},
                )

                self.assertEqual(response.status_code, 400)
                body = response.json()
                self.assertEqual(body["error"], "invalid_payload")
                self.assertEqual(body["details"], {"_row_": selector})

    def test_htmx_errors_are_html_fragments(self):
        response = self.client.get(
            "/backend/api/render",
            params={"renderable": "<nope>"},
            headers={"HX-Request": "true"},
        )

        self.assertEqual(response.status_code, 404)
        self.assertIn('class="alert alert-warning"', response.text)
        self.assertIn("&lt;nope&gt;", response.text)

    def test_missing_renderable_parameter_is_validation_error(self):
        response = self.client.get("/backend/api/render")

        self.assertEqual(response.status_code, 422)
        self.assertEqual(response.json()["error"], "Validation failed")

    def test_renderable_errors_propagate_as_server_errors(self):
        @registry.register("tests.broken")
        class BrokenTable(TableRenderable):
            def columns(self):
                return ["id"]

            def rows(self):
                raise RuntimeError("database unavailable")

        self.addCleanup(registry.unregister, "tests.broken")
        client = TestClient(self.app, raise_server_exceptions=False)

        response = client.get("/backend/api/render", params={"renderable": "tests.broken"})

        self.assertEqual(response.status_code, 500)


if __name__ == "__main__":
    unittest.main()
