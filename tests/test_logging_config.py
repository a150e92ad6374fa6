import logging
from swiftlint_review.logging_config import setup_logging, get_logger


def test_setup_logging_default():
    """Test default logging setup."""
    setup_logging()
    logger = get_logger(__name__)
    assert logger.getEffectiveLevel() == logging.WARNING


def test_setup_logging_verbose():
    """Test verbose logging setup."""
    setup_logging(verbose=True)
    logger = get_logger(__name__)
    assert logger.getEffectiveLevel() == logging.DEBUG


def test_setup_logging_quiet():
    """Test quiet logging setup."""
    setup_logging(quiet=True)
    logger = get_logger(__name__)
    assert logger.getEffectiveLevel() == logging.ERROR


def test_get_logger():
    """Test getting named logger."""
    logger = get_logger("test.module")
    assert logger.name == "swiftlint_review.test.module"


def test_get_logger_already_prefixed():
    """Test that package module names are not prefixed twice."""
    logger = get_logger("swiftlint_review.orchestrator")
    assert logger.name == "swiftlint_review.orchestrator"


def test_get_logger_package_root():
    """Test that the package logger itself is returned unchanged."""
    assert get_logger("swiftlint_review").name == "swiftlint_review"


def test_resolve_level_quiet_wins():
    """Test that --quiet overrides --verbose."""
    from swiftlint_review.logging_config import resolve_level

    assert resolve_level(verbose=True, quiet=True) == logging.ERROR
    assert resolve_level() == logging.WARNING


def test_setup_logging_stream_and_format():
    """Test that records go to the given stream with the module name when verbose."""
    import io

    stream = io.StringIO()
    setup_logging(verbose=True, stream=stream)
    get_logger("shell").debug("Running: swiftlint lint")

    assert stream.getvalue() == "DEBUG [swiftlint_review.shell]: Running: swiftlint lint\n"

    stream = io.StringIO()
    setup_logging(stream=stream)
    get_logger("orchestrator").warning("'swiftlint' was not found on PATH")

    assert stream.getvalue() == "WARNING: 'swiftlint' was not found on PATH\n"
