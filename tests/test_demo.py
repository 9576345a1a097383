import logging
import re

from pytest import approx

from scale_geom.demo import main


def last_number(line):
    return float(re.findall(r"-?\d+\.?\d*(?:e-?\d+)?", line)[-1])

class TestDemo:
    def teardown_method(self):
        logging.getLogger("scale_geom").setLevel(logging.NOTSET)

    def test_output(self, capsys):
        main()
        out = capsys.readouterr().out
        lines = out.splitlines()
        assert "vec1 + vec2 = (9.3, 11.3, 14.8)" in out
        assert "vec1 and vec2 are not equal" in out
        assert "vec1 and vec2 are different" in out
        assert "vec1 is not less than vec2" in out
        assert "vec1 is greater than vec2" in out
        assert "cross product of vec1 and vec2 is (-2.03, 1.71, -0.03)" in out

        dot_line = next(l for l in lines if l.startswith("dot product"))
        assert last_number(dot_line) == approx(107.0)

        mag_line = next(l for l in lines if l.startswith("magnitude of vec1"))
        assert last_number(mag_line) == approx(133.34**0.5)

        norm_line = next(l for l in lines if l.startswith("Normalized vec1"))
        assert norm_line.startswith("Normalized vec1 is (0.44")

    def test_log_file(self, tmp_path, capsys):
        log_path = tmp_path / "demo.log"
        main("DEBUG", str(log_path))
        capsys.readouterr()
        assert "mag=" in log_path.read_text()
        assert logging.getLogger("scale_geom").handlers == []
