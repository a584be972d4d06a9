import json
import math

import pytest

from agreement_eval.comparison import ComparisonRow, evaluate_candidate, evaluate_candidates
from agreement_eval.datasets import Partition, RankedList, Result
from agreement_eval.metrics import select_metrics
from agreement_eval.report import format_score, format_table, generate_html_report, to_json
from agreement_eval.types import ElementSetMismatchError


@pytest.fixture
def rows(animal_ranks, animal_tied, animal_partition):
    candidates = {
        "reversed.txt": Result(RankedList.from_sequence(["cat", "bear", "dog"])),
        "tied.txt": animal_tied,
        "groups.txt": animal_partition,
    }
    return evaluate_candidates(animal_ranks, candidates, ["kendall", "jaccard"])


class TestEvaluation:
    def test_rows_follow_input_order(self, rows):
        assert [row.name for row in rows] == ["reversed.txt", "tied.txt", "groups.txt"]

    def test_scores(self, rows):
        assert rows[0].scores == {"kendall": pytest.approx(-1.0), "jaccard": None}
        assert rows[2].scores == {"kendall": None, "jaccard": None}

    def test_all_metrics_by_default(self, animal_partition):
        rows = evaluate_candidates(animal_partition, {"same.txt": animal_partition})
        assert list(rows[0].scores) == [metric.name for metric in select_metrics()]
        assert rows[0].scores["jaccard"] == 1.0

    def test_element_mismatch_propagates(self, animal_ranks):
        other = Result(RankedList.from_sequence(["dog", "emu", "cat"]))
        with pytest.raises(ElementSetMismatchError):
            evaluate_candidate(animal_ranks, other, select_metrics(["kendall"]))


class TestFormatting:
    @pytest.mark.parametrize(
        "score, expected",
        [
            (None, "-"),
            (0.5, "0.5000"),
            (-1.0, "-1.0000"),
            (math.nan, "nan"),
            (math.inf, "inf"),
        ],
    )
    def test_format_score(self, score, expected):
        assert format_score(score) == expected

    def test_format_score_options(self):
        assert format_score(2 / 3, precision=2) == "0.67"
        assert format_score(None, placeholder="n/a") == "n/a"

    def test_table_layout(self, rows):
        table = format_table(rows, select_metrics(["kendall", "jaccard"]))
        lines = table.splitlines()
        assert lines[0].split() == ["Name", "Kendall", "Jaccard"]
        assert lines[1].split() == ["reversed.txt", "-1.0000", "-"]
        assert len({len(line) for line in lines}) == 1

    def test_json(self, rows):
        payload = json.loads(to_json("truth.txt", rows, max_kendall=1.0))
        assert payload["truth"] == "truth.txt"
        assert payload["max_kendall"] == 1.0
        assert payload["candidates"][2] == {
            "name": "groups.txt",
            "scores": {"kendall": None, "jaccard": None},
        }

    def test_json_degenerate_scores(self):
        row = ComparisonRow(name="c", scores={"overlap": math.nan})
        payload = json.loads(to_json("t", [row]))
        assert payload["candidates"][0]["scores"]["overlap"] == "nan"
        assert payload["max_kendall"] is None

    def test_html_report(self, rows, tmp_path):
        path = tmp_path / "report.html"
        generate_html_report(
            "truth <1>.txt",
            rows,
            select_metrics(["kendall", "jaccard"]),
            str(path),
            max_kendall=0.5,
        )
        content = path.read_text(encoding="utf-8")
        assert "truth &lt;1&gt;.txt" in content
        assert "<td>-1.0000</td>" in content
        assert "0.5000" in content


def test_partition_self_comparison_row():
    p = Result(Partition.from_groups([["a", "b"], ["c", "d"]]))
    row = evaluate_candidates(p, {"p": p}, ["smc", "overlap"])[0]
    assert row.scores == {"smc": 1.0, "overlap": 1.0}
