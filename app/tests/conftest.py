import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `lexis.i18n`) works during pytest collection, whatever the
# invocation directory.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest

from lexis.logging import configure_logging
from tests.factories.i18n import write_catalog

# The test session is the application here: it owns the logging setup
configure_logging()


@pytest.fixture
def locales_1(tmp_path):
    """Catalog root with English and Portuguese lines.

    - en/tests.yml: bye, hello
    - pt/tests.yml: hello
    """
    root = tmp_path / "locales-1"
    write_catalog(root, "en", "tests", {"bye": "Bye!", "hello": "Hello, {0}!"})
    write_catalog(root, "pt", "tests", {"hello": "Olá, {0}!"})
    return root


@pytest.fixture
def locales_2(tmp_path):
    """Catalog root overriding locales_1.

    - en/tests.yml: bye
    - pt-br/tests.yml: welcome
    """
    root = tmp_path / "locales-2"
    write_catalog(root, "en", "tests", {"bye": "Hasta la vista, baby."})
    write_catalog(root, "pt-br", "tests", {"welcome": "Bem-vindo, {name}!"})
    return root
