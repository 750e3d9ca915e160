from rut_lib import InvalidDVError, InvalidFormatError, OutOfRangeError, Rut
from rut_lib.core.services import validate_many, validate_one


class TestValidateOne:
    def test_valid(self):
        outcome = validate_one("17.951.585-7")
        assert outcome.ok
        assert outcome.rut == Rut.from_number(17951585)
        assert outcome.error is None
        assert outcome.error_kind is None

    def test_invalid_keeps_the_error(self):
        outcome = validate_one("17951585-K")
        assert not outcome.ok
        assert outcome.rut is None
        assert isinstance(outcome.error, InvalidDVError)
        assert outcome.error_kind == "InvalidDVError"


class TestValidateMany:
    def test_mixed_inputs(self):
        report = validate_many(
            [
                "17951585-7",
                "  5.665.328-7  ",
                "",
                "   ",
                "17.951,585-7",
                "17951585-K",
                "0.000.000-0",
            ]
        )
        assert report.summary() == {"total": 5, "valid": 2, "invalid": 3}
        assert [o.input for o in report.valid] == ["17951585-7", "5.665.328-7"]
        kinds = [type(o.error) for o in report.invalid]
        assert kinds == [InvalidFormatError, InvalidDVError, OutOfRangeError]

    def test_empty(self):
        report = validate_many([])
        assert report.summary() == {"total": 0, "valid": 0, "invalid": 0}
        assert report.valid == []
        assert report.invalid == []
