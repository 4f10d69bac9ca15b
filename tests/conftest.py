"""Shared pytest fixtures for apisig tests."""

from pathlib import Path

import pytest
from dotenv import load_dotenv
from hypothesis import settings

from apisig.core.config import ApisigConfig
from apisig.resolution.catalog import CatalogContext, TypeCatalog

# Load environment variables from .env file
load_dotenv()

# Configure hypothesis for property-based testing
settings.register_profile("ci", max_examples=100, deadline=None)
settings.register_profile("dev", max_examples=20, deadline=None)
settings.load_profile("dev")

MAIL_API = "com.example.api.MailApi"
MESSAGE = "com.example.api.Message"


def build_mail_catalog() -> TypeCatalog:
    """Catalog with a small mail API: MailApi extends BaseApi."""
    catalog = TypeCatalog.with_core_types()
    catalog.add_type(MESSAGE)
    catalog.add_type("com.example.api.BaseApi", is_interface=True)
    catalog.add_method("com.example.api.BaseApi", "ping", [], "void")

    catalog.add_type(
        MAIL_API,
        imports=["java.util.*"],
        supertypes=["BaseApi"],
        is_interface=True,
    )
    catalog.add_method(MAIL_API, "get", [], "Message")
    catalog.add_method(MAIL_API, "get", ["String"], "Message")
    catalog.add_method(MAIL_API, "get", ["String", "int"], "Message")
    catalog.add_method(MAIL_API, "send", ["Message"], "void")
    catalog.add_method(MAIL_API, "send", ["Message", "String[]"], "void")
    catalog.add_method(MAIL_API, "fetchAll", ["int[]"], "int[]")
    catalog.add_method(MAIL_API, "matrix", [], "int[][]")
    catalog.add_method(MAIL_API, "search", ["String", "List"], "List")
    catalog.add_method(MAIL_API, "delete", ["long"], "boolean")
    catalog.add_method(MAIL_API, "flag", ["String..."], "void")
    catalog.add_method(MAIL_API, "Get", ["Message"], "Message")
    return catalog


@pytest.fixture
def mail_catalog() -> TypeCatalog:
    """Provide a fresh mail API catalog."""
    return build_mail_catalog()


@pytest.fixture
def mail_context(mail_catalog: TypeCatalog) -> CatalogContext:
    """Provide a resolution context over the mail API catalog."""
    return CatalogContext(mail_catalog, default_namespace="java.lang")


@pytest.fixture
def default_config() -> ApisigConfig:
    """Provide configuration with defaults only (no env or .env file)."""
    return ApisigConfig(_env_file=None)


@pytest.fixture
def java_sample_path() -> Path:
    """Path to the Java sample sources."""
    return Path(__file__).parent / "fixtures" / "java_sample"
