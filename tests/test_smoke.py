import importlib


def test_import_package():
    """Basic smoke test: package imports and version present."""
    m = importlib.import_module("easinote_splash")
    assert hasattr(m, "__version__")
    assert isinstance(m.__version__, str)


def test_config_example_exists():
    import pathlib

    p = pathlib.Path(__file__).resolve().parents[1] / "config.example.json"
    assert p.exists(), "config.example.json must exist"


def test_config_example_matches_defaults():
    import json
    import pathlib

    from easinote_splash.core.config_manager import ConfigManager

    p = pathlib.Path(__file__).resolve().parents[1] / "config.example.json"
    data = json.loads(p.read_text(encoding="utf-8"))
    assert set(data) == set(ConfigManager.DEFAULT_CONFIG)
