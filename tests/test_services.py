"""Tests for URL building, translation, settings and model plucking."""

from __future__ import annotations

import os
import unittest
from types import SimpleNamespace
from unittest import mock

from adminkit.config import AdminSettings
from adminkit.services import AdminUrlBuilder, ModelSource, Translator, pluck
from tests.unittest_support import UserSource


class TestAdminUrlBuilder(unittest.TestCase):
    def test_relative_paths_go_under_prefix(self):
        urls = AdminUrlBuilder("admin")

        self.assertEqual(urls.url("users"), "/admin/users")
        self.assertEqual(urls.url("/users/"), "/admin/users")
        self.assertEqual(urls.url(""), "/admin")

    def test_empty_prefix(self):
        urls = AdminUrlBuilder("/")

        self.assertEqual(urls.url("users"), "/users")
        self.assertEqual(urls.url(""), "/")

    def test_base_url_and_query(self):
        urls = AdminUrlBuilder("/backend/", base_url="https://example.com/")

        self.assertEqual(urls.url("api/render", {"a": 1}), "https://example.com/backend/api/render?a=1")

    def test_absolute_urls_pass_through(self):
        urls = AdminUrlBuilder("admin")

        self.assertEqual(urls.url("https://cdn.example.com/x"), "https://cdn.example.com/x")
        self.assertEqual(urls.url("//cdn.example.com/x"), "//cdn.example.com/x")
        self.assertEqual(urls.url("http://h/x?a=1", {"b": 2}), "http://h/x?a=1&b=2")


class TestTranslator(unittest.TestCase):
    def test_locale_lookup_with_fallbacks(self):
        translator = Translator("zh_CN")

        self.assertEqual(translator.trans("admin.submit"), "提交")
        self.assertEqual(translator.trans("admin.submit", locale="en"), "Submit")
        self.assertEqual(translator.trans("admin.unknown"), "admin.unknown")

    def test_unknown_locale_falls_back_to_english(self):
        with self.assertLogs("adminkit.services.translation_service", level="WARNING"):
            translator = Translator("xx")

        self.assertEqual(translator.trans("admin.cancel"), "Cancel")

    def test_extra_catalogs_extend_builtins(self):
        translator = Translator("de", catalogs={"de": {"admin.submit": "Absenden"}})

        self.assertEqual(translator.trans("admin.submit"), "Absenden")
        self.assertEqual(translator.trans("admin.cancel"), "Cancel")


class TestSettings(unittest.TestCase):
    def test_from_env(self):
        env = {
            "ADMINKIT_ROUTE_PREFIX": "backend",
            "ADMINKIT_BASE_URL": "https://example.com/",
            "ADMINKIT_LOCALE": "zh_CN",
            "ADMINKIT_DEBUG": "true",
            "ADMINKIT_LOG_LEVEL": "debug",
        }
        with mock.patch.dict(os.environ, env, clear=False):
            settings = AdminSettings.from_env()

        self.assertEqual(settings.route_prefix, "backend")
        self.assertEqual(settings.base_url, "https://example.com")
        self.assertEqual(settings.locale, "zh_CN")
        self.assertTrue(settings.debug)
        self.assertEqual(settings.log_level, "DEBUG")
        self.assertIsNone(settings.template_dir)

    def test_defaults(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            settings = AdminSettings.from_env()

        self.assertEqual(settings, AdminSettings())


class TestPluck(unittest.TestCase):
    def test_pluck_mappings_and_objects(self):
        rows = [{"id": 1, "name": "Ada"}, SimpleNamespace(id=2, name="Grace")]

        self.assertEqual(pluck(rows, "name"), {1: "Ada", 2: "Grace"})

    def test_source_protocol(self):
        self.assertIsInstance(UserSource(), ModelSource)


if __name__ == "__main__":
    unittest.main()


class TestTemplating(unittest.TestCase):
    def tearDown(self):
        from adminkit.context import set_admin_context

        set_admin_context(None)

    def test_missing_template_raises(self):
        from adminkit.exceptions import TemplateRenderError
        from adminkit.templating import render_template

        with self.assertRaises(TemplateRenderError) as ctx:
            render_template("missing/template.html", {})
        self.assertEqual(ctx.exception.details, {"template": "missing/template.html"})

    def test_template_dir_override_takes_precedence(self):
        import tempfile
        from pathlib import Path

        from adminkit.context import AdminContext, set_admin_context
        from adminkit.form import Field

        with tempfile.TemporaryDirectory() as tmpdir:
            override = Path(tmpdir) / "form"
            override.mkdir()
            (override / "input.html").write_text("<custom>{{ name }}</custom>", encoding="utf-8")
            set_admin_context(AdminContext(settings=AdminSettings(template_dir=tmpdir)))

            html = str(Field("city").render())

        self.assertEqual(html, "<custom>city</custom>")


class TestLoggingAndCli(unittest.TestCase):
    def test_configure_logging_adds_single_handler(self):
        import logging

        from adminkit.helpers.log_format import ColorizedFormatter, configure_logging

        logger = configure_logging("warning")
        configure_logging("WARNING")

        handlers = [handler for handler in logger.handlers if isinstance(handler.formatter, ColorizedFormatter)]
        self.assertEqual(len(handlers), 1)
        self.assertEqual(logger.level, logging.WARNING)
        logger.setLevel(logging.ERROR)

    def test_formatter_without_colours(self):
        import logging

        from adminkit.helpers.log_format import ColorizedFormatter

        formatter = ColorizedFormatter("%(levelname)s %(message)s", use_colors=False)
        record = logging.LogRecord("adminkit", logging.INFO, __file__, 1, "ready", None, None)

        self.assertEqual(formatter.format(record), "INFO ready")

    def test_cli_parser_defaults(self):
        from adminkit.cli import build_parser

        args = build_parser().parse_args(["--port", "9000", "--prefix", "backend"])

        self.assertEqual((args.host, args.port, args.prefix, args.log_level), ("127.0.0.1", 9000, "backend", None))
        self.assertFalse(args.reload)

    def test_cli_serves_app_object_without_reload(self):
        from adminkit.cli import main
        from adminkit.context import set_admin_context

        self.addCleanup(set_admin_context, None)
        with mock.patch.dict(os.environ, {}, clear=True), mock.patch("adminkit.cli.uvicorn.run") as run:
            self.assertEqual(main(["--prefix", "backend", "--log-level", "error"]), 0)

        app = run.call_args.args[0]
        self.assertEqual(app.state.settings.route_prefix, "backend")
        self.assertEqual(run.call_args.kwargs["log_level"], "error")
        self.assertNotIn("reload", run.call_args.kwargs)

    def test_cli_reload_passes_factory_and_exports_overrides(self):
        from adminkit.cli import APP_FACTORY, main

        with mock.patch.dict(os.environ, {}, clear=True), mock.patch("adminkit.cli.uvicorn.run") as run:
            main(["--reload", "--prefix", "backend", "--port", "9001"])
            exported = (os.environ["ADMINKIT_ROUTE_PREFIX"], os.environ["ADMINKIT_LOG_LEVEL"])

        self.assertEqual(run.call_args.args, (APP_FACTORY,))
        self.assertEqual(
            run.call_args.kwargs,
            {"factory": True, "reload": True, "host": "127.0.0.1", "port": 9001, "log_level": "info"},
        )
        self.assertEqual(exported, ("backend", "INFO"))
