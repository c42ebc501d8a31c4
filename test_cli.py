"""End-to-end tests for the command-line entry point."""

import json

from api.cli.main import create_parser, run
from api.use_cases import NoteUseCase
from shared.exceptions import PublishError

from test_signals import SELECTION_SORT_CPP
from test_use_case import make_config


class FakePublisher:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.published = []

    def publish(self, note):
        if self.fail:
            raise PublishError("Notion API call failed: 401")
        self.published.append(note)
        return {"id": "page-42"}


def _write_source(tmp_path):
    path = tmp_path / "selection_sort.cpp"
    path.write_text(SELECTION_SORT_CPP, encoding="utf-8")
    return path


def test_missing_file_exits_non_zero(tmp_path, capsys):
    args = create_parser().parse_args([str(tmp_path / "nope.cpp"), "--mode", "heuristic"])
    assert run(args, config=make_config(tmp_path)) == 1
    assert "Error reading file" in capsys.readouterr().out


def test_heuristic_run_writes_json(tmp_path, capsys):
    source = _write_source(tmp_path)
    out = tmp_path / "note.json"
    args = create_parser().parse_args([str(source), "--mode", "heuristic", "--json-out", str(out)])

    assert run(args, config=make_config(tmp_path)) == 0
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["title"] == "Selection Sort (likely)"
    assert data["language"] == "cpp"
    assert "Problem (preview):" in capsys.readouterr().out


def test_no_save_writes_nothing(tmp_path, capsys):
    source = _write_source(tmp_path)
    config = make_config(tmp_path)
    args = create_parser().parse_args([str(source), "--mode", "heuristic", "--no-save"])

    assert run(args, config=config) == 0
    assert not (tmp_path / "fixtures").exists()
    assert "Preview only" in capsys.readouterr().out


def test_publish_when_configured(tmp_path, capsys):
    source = _write_source(tmp_path)
    config = make_config(tmp_path, notion_token="secret", notion_parent_page_id="parent")
    publisher = FakePublisher()
    use_case = NoteUseCase(config, publisher_factory=lambda cfg: publisher)
    args = create_parser().parse_args([str(source), "--mode", "heuristic", "--no-save"])

    assert run(args, config=config, use_case=use_case) == 0
    assert publisher.published[0].title == "Selection Sort (likely)"
    assert "page-42" in capsys.readouterr().out


def test_no_publish_flag(tmp_path):
    source = _write_source(tmp_path)
    config = make_config(tmp_path, notion_token="secret", notion_parent_page_id="parent")
    publisher = FakePublisher()
    use_case = NoteUseCase(config, publisher_factory=lambda cfg: publisher)
    args = create_parser().parse_args([str(source), "--mode", "heuristic", "--no-save", "--no-publish"])

    assert run(args, config=config, use_case=use_case) == 0
    assert publisher.published == []


def test_publish_failure_is_only_a_warning(tmp_path, capsys):
    source = _write_source(tmp_path)
    config = make_config(tmp_path, notion_token="secret", notion_parent_page_id="parent")
    use_case = NoteUseCase(config, publisher_factory=lambda cfg: FakePublisher(fail=True))
    args = create_parser().parse_args([str(source), "--mode", "heuristic"])

    assert run(args, config=config, use_case=use_case) == 0
    assert "[warn] Notion post failed" in capsys.readouterr().out
    assert (tmp_path / "fixtures" / "Selection Sort (likely).json").exists()
