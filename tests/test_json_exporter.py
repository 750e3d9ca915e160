import json

from rut_lib import Format, Rut
from rut_lib.adapters.json_exporter import export_report_json, export_ruts_json
from rut_lib.core.services import validate_many


def test_export_ruts_json(tmp_path):
    ruts = [Rut.from_number(17951585), Rut.from_number(1000005)]
    path = export_ruts_json(ruts=ruts, output_path=tmp_path / "out" / "ruts.json", fmt=Format.DOTS)

    assert path.exists()
    text = path.read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert json.loads(text) == [
        {"dv": "7", "formatted": "17.951.585-7", "number": 17951585},
        {"dv": "K", "formatted": "1.000.005-K", "number": 1000005},
    ]


def test_export_report_json(tmp_path):
    report = validate_many(["17951585-7", "17951585-K"])
    path = export_report_json(report=report, output_path=tmp_path / "report.json")

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["summary"] == {"invalid": 1, "total": 2, "valid": 1}
    ok, bad = data["results"]
    assert ok["valid"] is True
    assert ok["rut"]["formatted"] == "17951585-7"
    assert ok["error"] is None
    assert bad["valid"] is False
    assert bad["rut"] is None
    assert bad["error"] == "Invalid DV, must be 7, instead K."
    assert bad["error_kind"] == "InvalidDVError"
