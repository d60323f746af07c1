import logging

from document_ui.lib import logs, objects
from document_ui.models.common import Notice


def test_file_paths_become_child_loggers():
    log = logs.logger("/srv/app/document_ui/services/paged_collection.py")
    assert log.name == "document_ui.paged_collection"
    assert log.parent is logging.getLogger("document_ui")
    assert len(logging.getLogger("document_ui").handlers) == 1


def test_records_reach_caplog(caplog):
    log = logs.logger("ledger")
    with caplog.at_level(logging.INFO, logger="document_ui"):
        log.info("Loaded %s rows", 3)
    assert "Loaded 3 rows" in caplog.text


def test_to_json_handles_dataclasses():
    assert objects.to_json(Notice.error("Failed", "boom")) == (
        '{"title": "Failed", "description": "boom", "level": "error"}'
    )
    assert objects.to_json({"notice": Notice("Hi")}) == (
        '{"notice": {"title": "Hi", "description": "", "level": "info"}}'
    )
