import json

import matplotlib

matplotlib.use("Agg")

import plot


RESULTS = {
    "lookup": {"seconds": 0.2, "correct": True},
    "recursion": {"seconds": 0.1, "correct": False},
}


def test_load_results(tmp_path):
    path = tmp_path / "results.json"
    path.write_text(json.dumps(RESULTS))

    assert plot.load_results(path) == RESULTS


def test_plot_results_writes_png(tmp_path):
    output = plot.plot_results(RESULTS, tmp_path / "results")

    assert output == tmp_path / "results" / "timings.png"
    assert output.read_bytes().startswith(b"\x89PNG")


def test_plot_results_with_no_variants(tmp_path):
    output = plot.plot_results({}, tmp_path)

    assert output.exists()
