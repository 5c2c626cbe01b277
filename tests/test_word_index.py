import json
import logging

import pytest

from errors import ArtifactLoadError
from word_index import OOV_INDEX, WordIndex


class TestWordIndex:

    def test_lookup(self):
        wi = WordIndex({"good": 5})
        assert wi.lookup("good") == 5
        assert wi.lookup("missing") == OOV_INDEX

    def test_is_read_only(self):
        wi = WordIndex({"good": 5})
        with pytest.raises(TypeError):
            wi["bad"] = 7

    def test_copy_is_independent_of_source(self):
        src = {"good": 5}
        wi = WordIndex(src)
        src["bad"] = 7
        assert "bad" not in wi
        assert len(wi) == 1

    def test_from_json(self, tmp_path):
        p = tmp_path / "word_index.json"
        p.write_text(json.dumps({"good": 5, "bad": 7.0}), encoding="utf-8")
        wi = WordIndex.from_json(p)
        assert dict(wi) == {"good": 5, "bad": 7}
        assert isinstance(wi["bad"], int)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ArtifactLoadError) as exc:
            WordIndex.from_json(tmp_path / "nope.json")
        assert exc.value.path == tmp_path / "nope.json"

    def test_invalid_json(self, tmp_path):
        p = tmp_path / "word_index.json"
        p.write_text("{not json", encoding="utf-8")
        with pytest.raises(ArtifactLoadError):
            WordIndex.from_json(p)

    def test_not_an_object(self, tmp_path):
        p = tmp_path / "word_index.json"
        p.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ArtifactLoadError):
            WordIndex.from_json(p)

    @pytest.mark.parametrize("bad_id", ["5", 2.5, True, None])
    def test_non_integer_id(self, tmp_path, bad_id):
        p = tmp_path / "word_index.json"
        p.write_text(json.dumps({"good": bad_id}), encoding="utf-8")
        with pytest.raises(ArtifactLoadError):
            WordIndex.from_json(p)

    @pytest.mark.parametrize("raw", ['{"good": NaN}', '{"good": Infinity}', '{"good": -Infinity}'])
    def test_non_finite_id(self, tmp_path, raw):
        """json accepts NaN and Infinity literals; neither is a valid id."""
        p = tmp_path / "word_index.json"
        p.write_text(raw, encoding="utf-8")
        with pytest.raises(ArtifactLoadError) as exc:
            WordIndex.from_json(p)
        assert exc.value.path == p

    def test_negative_id_is_flagged(self, tmp_path, caplog):
        p = tmp_path / "word_index.json"
        p.write_text(json.dumps({"good": 5, "odd": -3}), encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="word_index"):
            wi = WordIndex.from_json(p)
        assert wi["odd"] == -3
        assert "negative id" in caplog.text
