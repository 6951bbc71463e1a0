"""Basic import tests to verify package structure."""


def test_import_core():
    """Verify main package imports."""
    import core
    assert core.__version__ == "0.1.0"


def test_import_modules():
    """Verify every core module imports without a display."""
    from core import constants, data_models, history, input, loop, physics, rendering, settings, timing
    assert constants.HISTORY_LENGTH == 100
