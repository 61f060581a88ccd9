import json

import pytest

from chatmd.render.runner import main


def test_prints_normalized_markdown(tmp_path, capsys):
    src = tmp_path / "answer.md"
    src.write_text("See [1][2] and \\(x\\)", encoding="utf-8")
    main([str(src), "--chunk-size", "3"])
    out = capsys.readouterr().out
    assert out == "See [1,2](#cite-group-1-2) and $x$\n"


def test_prints_segments_as_json(tmp_path, capsys):
    src = tmp_path / "answer.md"
    src.write_text("a  \nb", encoding="utf-8")
    main([str(src), "--segments"])
    data = json.loads(capsys.readouterr().out)
    assert data == [
        {"kind": "text", "text": "a"},
        {"kind": "break", "key": "br-0"},
        {"kind": "text", "text": "b"},
    ]


def test_missing_file_exits_with_error(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "nope.md")])
    assert exc.value.code == 1
    assert capsys.readouterr().out.startswith("Error:")
