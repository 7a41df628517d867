import json

from adapters.json_exporter import display_to_payload, dumps_display, export_display_json
from core.services.berlin_clock import encode


def test_payload(afternoon):
    payload = display_to_payload(encode(afternoon), afternoon)
    assert payload == {
        "time": "13:17:01",
        "rows": ["O", "RROO", "RRRO", "YYROOOOOOOO", "YYOO"],
        "lit": [0, 2, 3, 3, 2],
    }


def test_dumps_is_stable(afternoon):
    text = dumps_display(encode(afternoon), afternoon)
    assert text.endswith("}\n")
    assert text == dumps_display(encode(afternoon), afternoon)
    assert list(json.loads(text)) == ["lit", "rows", "time"]


def test_export_writes_file(tmp_path, afternoon):
    target = tmp_path / "out" / "clock.json"
    path = export_display_json(display=encode(afternoon), time=afternoon, output_path=target)
    assert path == target
    assert json.loads(target.read_text(encoding="utf-8"))["time"] == "13:17:01"
