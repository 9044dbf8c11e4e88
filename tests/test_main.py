import json

import pytest
import responses

from tamatasker.database import Database
from tamatasker.handlers import HELP_TEXT
from tamatasker.main import TOKEN_ENV, main
from tamatasker.telegram import API_URL

BASE = f"{API_URL}/bottoken"


def test_missing_token_exits(monkeypatch):
    monkeypatch.delenv(TOKEN_ENV, raising=False)
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2


def test_main_stops_on_polling_error(tmp_path, capsys):
    db_path = tmp_path / "data.db"
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        rsps.add(responses.POST, f"{BASE}/deleteWebhook", json={"ok": True, "result": True})
        rsps.add(responses.POST, f"{BASE}/getUpdates", json={"ok": False, "description": "stop"})
        assert main(["--token", "token", "--db", str(db_path), "--timeout", "0"]) == 0
    assert "stop" in capsys.readouterr().err
    with Database(db_path) as db:
        assert db.show_active_tasks(1) == []


def test_main_dispatches_updates(tmp_path, monkeypatch):
    monkeypatch.setenv(TOKEN_ENV, "token")
    update = {
        "update_id": 7,
        "message": {"message_id": 1, "chat": {"id": 5}, "date": 0, "text": "/help"},
    }
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        rsps.add(responses.POST, f"{BASE}/deleteWebhook", json={"ok": True, "result": True})
        rsps.add(responses.POST, f"{BASE}/getUpdates", json={"ok": True, "result": [update]})
        rsps.add(responses.POST, f"{BASE}/getUpdates", json={"ok": False, "description": "stop"})
        rsps.add(responses.POST, f"{BASE}/sendMessage", json={"ok": True, "result": {}})
        assert main(["--db", str(tmp_path / "data.db"), "--timeout", "0"]) == 0
        calls = list(rsps.calls)
    sent = [c for c in calls if c.request.url.endswith("/sendMessage")]
    assert len(sent) == 1
    assert json.loads(sent[0].request.body) == {"chat_id": 5, "text": HELP_TEXT}
    polls = [c for c in calls if c.request.url.endswith("/getUpdates")]
    assert json.loads(polls[1].request.body)["offset"] == update["update_id"] + 1