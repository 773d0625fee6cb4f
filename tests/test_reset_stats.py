from BackEnd.core.config import load_config
from BackEnd.core.models import SessionRecord, SessionStatus
from BackEnd.repos.session_repo import open_ledger
from reset_stats import reset_all_stats


def seed(monkeypatch, tmp_path):
	monkeypatch.setenv("FOCUS_DATA_DIR", str(tmp_path))
	ledger = open_ledger(load_config())
	ledger.append(SessionRecord(1, "Old", 25, 1500, SessionStatus.COMPLETED, "2026-10-17T10:00:00+00:00"))
	return ledger


def test_reset_clears_after_confirmation(monkeypatch, tmp_path):
	seed(monkeypatch, tmp_path)

	assert reset_all_stats(ask=lambda prompt: "yes") is True
	assert len(open_ledger(load_config())) == 0


def test_reset_cancelled(monkeypatch, tmp_path):
	seed(monkeypatch, tmp_path)

	assert reset_all_stats(ask=lambda prompt: "no") is False
	assert len(open_ledger(load_config())) == 1


def test_reset_with_empty_history(monkeypatch, tmp_path):
	monkeypatch.setenv("FOCUS_DATA_DIR", str(tmp_path))
	assert reset_all_stats(ask=lambda prompt: "yes") is False
