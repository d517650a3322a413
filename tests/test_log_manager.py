import logging

from anititle.services.log_manager import get_logs, setup_logging
from anititle.title import parse


def test_setup_logging_writes_file_and_memory(tmp_path):
    log_dir = tmp_path / "logs"
    root = logging.getLogger()
    try:
        setup_logging(log_dir)
        logging.getLogger("anititle.test").info("hello from test")
        assert (log_dir / "app.log").exists()
        assert get_logs()[0].endswith("hello from test")
        logging.getLogger("httpx").warning("third-party record")
        assert get_logs()[0].endswith("third-party record")
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()


def test_rule_hit_logged_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="anititle.title.episode"):
        parse("[Group] Title S01E05 [1080p]")
    assert any("season_episode" in record.getMessage() for record in caplog.records)
