from __future__ import annotations

from admin_panel import cli
from admin_panel.core import assets


def test_publish_then_check_assets(tmp_path, capsys) -> None:
    target = tmp_path / "vendor" / "admin_panel"

    assert cli.main(["publish", "--target", str(target)]) == 0
    assert (target / assets.MANIFEST_NAME).exists()

    exit_code = cli.main(["check-assets", "--published", str(target / assets.MANIFEST_NAME)])
    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Ressources à jour." in captured.out


def test_check_assets_reports_missing_publication(tmp_path, capsys) -> None:
    exit_code = cli.main(["check-assets", "--published", str(tmp_path / "missing.json")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "python -m admin_panel publish" in captured.out


def test_check_assets_reports_outdated_manifest(tmp_path, capsys) -> None:
    published = tmp_path / assets.MANIFEST_NAME
    published.write_text("{}", encoding="utf-8")

    exit_code = cli.main(["check-assets", "--published", str(published)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "obsolètes" in captured.out


def test_serve_delegates_to_uvicorn(monkeypatch) -> None:
    calls: list[tuple] = []
    monkeypatch.setattr(cli, "_serve", lambda host, port, reload: calls.append((host, port, reload)) or 0)

    assert cli.main(["serve", "--port", "9000"]) == 0
    assert calls == [("127.0.0.1", 9000, False)]
