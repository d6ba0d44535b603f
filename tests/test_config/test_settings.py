# tests/test_config/test_settings.py
import os
from replacetmpl.config.settings import App, CONTEXT_CHARACTERS, DEFAULT_PREFIX


def setup_function():
    for k in list(os.environ):
        if k.startswith("RTM_"):
            del os.environ[k]


def teardown_function():
    for k in list(os.environ):
        if k.startswith("RTM_"):
            del os.environ[k]


def test_app_default_settings():
    app = App()
    assert app.beQuiet is False
    assert app.debug_mode is False
    assert app.templateGlob == "**/*.tmpl"
    assert app.templateSuffix == ".tmpl"
    assert app.contextCharacters == CONTEXT_CHARACTERS == 20


def test_default_prefix():
    assert DEFAULT_PREFIX == "package"


def test_app_env_override():
    os.environ["RTM_BEQUIET"] = "true"
    os.environ["RTM_DEBUG_MODE"] = "true"
    os.environ["RTM_TEMPLATEGLOB"] = "*.in"
    os.environ["RTM_TEMPLATESUFFIX"] = ".in"
    os.environ["RTM_CONTEXTCHARACTERS"] = "40"

    app = App()
    assert app.beQuiet is True
    assert app.debug_mode is True
    assert app.templateGlob == "*.in"
    assert app.templateSuffix == ".in"
    assert app.contextCharacters == 40
